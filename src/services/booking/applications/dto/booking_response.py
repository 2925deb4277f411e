from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus


@dataclass(frozen=True)
class BookingResponse:
    """一覧取得用の読み取りモデル

    永続化せず、取得のたびに Booking と外部サービスの表示名から組み立てる。
    """

    id: str
    user_id: str
    booking_date: datetime
    status: BookingStatus
    service_ids: list[str]
    vehicle_id: str
    additional_notes: str | None
    payment_method: str | None
    phone_number: str | None
    total_price: Decimal
    vehicle_description: str
    service_names: str

    @classmethod
    def from_booking(
        cls, booking: Booking, vehicle_description: str, service_names: str
    ) -> BookingResponse:
        return cls(
            id=str(booking.id),
            user_id=booking.user_id,
            booking_date=booking.booking_date.value,
            status=booking.status,
            service_ids=booking.service_ids,
            vehicle_id=booking.vehicle_id,
            additional_notes=booking.additional_notes,
            payment_method=booking.payment_method,
            phone_number=booking.phone_number,
            total_price=booking.total_price.amount,
            vehicle_description=vehicle_description,
            service_names=service_names,
        )
