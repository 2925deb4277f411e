from __future__ import annotations

from pydantic import BaseModel

from services.booking.applications.dto import BookingResponse
from services.booking.domain.entity.booking import Booking
from services.shared.domain import IsoDateTime


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    user_id: str
    vehicle_id: str
    service_ids: list[str]
    booking_date: str
    status: str
    total_price: str
    additional_notes: str | None = None
    payment_method: str | None = None
    phone_number: str | None = None
    estimated_completion_time: str | None = None
    actual_completion_time: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingSummaryData(BaseModel):
    """一覧用の予約データ（表示名付き）"""

    booking_id: str
    user_id: str
    vehicle_id: str
    vehicle_description: str
    service_ids: list[str]
    service_names: str
    booking_date: str
    status: str
    total_price: str
    additional_notes: str | None = None
    payment_method: str | None = None
    phone_number: str | None = None


class BookingListResponse(BaseModel):
    """一覧取得の成功レスポンスモデル"""

    status: str = "success"
    bookings: list[BookingSummaryData]
    count: int


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking.id),
            user_id=booking.user_id,
            vehicle_id=booking.vehicle_id,
            service_ids=booking.service_ids,
            booking_date=str(booking.booking_date),
            status=booking.status.value,
            total_price=str(booking.total_price.amount),
            additional_notes=booking.additional_notes,
            payment_method=booking.payment_method,
            phone_number=booking.phone_number,
            estimated_completion_time=_optional_str(booking.estimated_completion_time),
            actual_completion_time=_optional_str(booking.actual_completion_time),
            created_at=_optional_str(booking.created_at),
            updated_at=_optional_str(booking.updated_at),
        )
    ).model_dump()


def to_list_response(responses: list[BookingResponse]) -> dict:
    """BookingResponse の一覧をレスポンス辞書に変換する"""
    bookings = [
        BookingSummaryData(
            booking_id=r.id,
            user_id=r.user_id,
            vehicle_id=r.vehicle_id,
            vehicle_description=r.vehicle_description,
            service_ids=r.service_ids,
            service_names=r.service_names,
            booking_date=r.booking_date.isoformat(),
            status=r.status.value,
            total_price=str(r.total_price),
            additional_notes=r.additional_notes,
            payment_method=r.payment_method,
            phone_number=r.phone_number,
        )
        for r in responses
    ]
    return BookingListResponse(bookings=bookings, count=len(bookings)).model_dump()


def _optional_str(value: IsoDateTime | None) -> str | None:
    return str(value) if value is not None else None
