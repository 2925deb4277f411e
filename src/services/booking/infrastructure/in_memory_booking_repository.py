from collections.abc import Callable

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class InMemoryBookingRepository(BookingRepository):
    """メモリ上の dict に予約を保持する BookingRepository（ローカル実行・テスト用）

    一覧は挿入順で返す。保存・取得のたびにエンティティを複製し、
    呼び出し側での変更がストアに漏れないようにする。
    """

    def __init__(self, clock: Callable[[], IsoDateTime] = IsoDateTime.now) -> None:
        self._bookings: dict[BookingId, Booking] = {}
        self._clock = clock

    def next_id(self) -> BookingId:
        return BookingId.generate()

    def save(self, booking: Booking) -> Booking:
        if booking.id in self._bookings:
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")
        now = self._clock()
        stored = _copy(booking, created_at=now, updated_at=now)
        self._bookings[booking.id] = stored
        return _copy(stored)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        stored = self._bookings.get(booking_id)
        return _copy(stored) if stored is not None else None

    def update(self, booking: Booking) -> Booking:
        stored = self._bookings.get(booking.id)
        if stored is None:
            raise ResourceNotFoundException(f"Booking not found: {booking.id}")
        updated = _copy(
            stored, status=booking.status, updated_at=self._clock()
        )
        self._bookings[booking.id] = updated
        return _copy(updated)

    def find_by_user_id(self, user_id: str) -> list[Booking]:
        return [_copy(b) for b in self._bookings.values() if b.user_id == user_id]

    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        return [_copy(b) for b in self._bookings.values() if b.status == status]


def _copy(booking: Booking, **overrides) -> Booking:
    fields = {
        "id": booking.id,
        "user_id": booking.user_id,
        "vehicle_id": booking.vehicle_id,
        "service_ids": booking.service_ids,
        "booking_date": booking.booking_date,
        "total_price": booking.total_price,
        "status": booking.status,
        "additional_notes": booking.additional_notes,
        "payment_method": booking.payment_method,
        "phone_number": booking.phone_number,
        "estimated_completion_time": booking.estimated_completion_time,
        "actual_completion_time": booking.actual_completion_time,
        "created_at": booking.created_at,
        "updated_at": booking.updated_at,
    }
    fields.update(overrides)
    return Booking(**fields)
