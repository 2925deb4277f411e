from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import BookingDetails
from services.booking.domain.value_object import BookingId, TotalPrice
from services.shared.domain import IsoDateTime

FIXED_NOW = IsoDateTime.from_string("2025-01-01T00:00:00+00:00")


@pytest.fixture
def fixed_clock():
    """常に FIXED_NOW を返す時計"""
    return lambda: FIXED_NOW


@pytest.fixture
def booking_id():
    return BookingId(value="booking-123")


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: str = "booking-123",
        user_id: str = "user-1",
        vehicle_id: str = "vehicle-abcdef",
        service_ids: list[str] | None = None,
        booking_date: str = "2025-06-01T10:00:00+00:00",
        total_price: Decimal = Decimal("99.99"),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=user_id,
            vehicle_id=vehicle_id,
            service_ids=["svc-1", "svc-2"] if service_ids is None else service_ids,
            booking_date=IsoDateTime.from_string(booking_date),
            total_price=TotalPrice(total_price),
            status=status,
        )

    return _factory


@pytest.fixture
def create_booking_details():
    """BookingDetails を生成する Factory fixture"""

    def _factory(**overrides) -> BookingDetails:
        details: BookingDetails = {
            "user_id": "user-1",
            "vehicle_id": "vehicle-abcdef",
            "service_ids": ["svc-1", "svc-2"],
            "booking_date": datetime.now(timezone.utc) + timedelta(days=1),
            "total_price": Decimal("99.99"),
            "additional_notes": "Please be careful",
            "payment_method": "CARD",
            "phone_number": "+123456789",
        }
        details.update(overrides)  # type: ignore[typeddict-item]
        return details

    return _factory
