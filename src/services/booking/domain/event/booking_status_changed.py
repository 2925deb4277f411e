from dataclasses import dataclass

from services.booking.domain.enum.booking_status import BookingStatus
from services.booking.domain.value_object.booking_id import BookingId


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが変更されたことを表すドメインイベント"""

    booking_id: BookingId
    previous_status: BookingStatus
    new_status: BookingStatus
