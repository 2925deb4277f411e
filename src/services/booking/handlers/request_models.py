from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.booking.domain.factory import BookingDetails
from services.shared.utils import to_decimal


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    user_id: str = Field(
        ...,
        min_length=1,
        description="ユーザーID",
        examples=["2f1c9a0e-7a53-4bb3-9b0e-3f7f1d0c2a11"],
    )

    booking_date: datetime = Field(
        ...,
        description="予約日時（ISO 8601形式、未来の日時）",
        examples=["2030-01-01T10:00:00+09:00"],
    )

    service_ids: list[str] = Field(
        ...,
        description="選択したサービスIDの一覧（空リスト可）",
        examples=[["oil-change", "tire-rotation"]],
    )

    vehicle_id: str = Field(
        ...,
        min_length=1,
        description="車両ID",
        examples=["9b3e4c1d-5f6a-4b7c-8d9e-0a1b2c3d4e5f"],
    )

    additional_notes: str | None = Field(default=None, description="備考")
    payment_method: str | None = Field(default=None, description="支払い方法")
    phone_number: str | None = Field(default=None, description="連絡先電話番号")

    total_price: Decimal = Field(..., ge=0, description="合計金額", examples=[99.99])

    @field_validator("total_price", mode="before")
    @classmethod
    def convert_total_price_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    def to_booking_details(self) -> BookingDetails:
        """ドメイン層の入力データ構造に変換する"""
        return {
            "user_id": self.user_id,
            "vehicle_id": self.vehicle_id,
            "service_ids": list(self.service_ids),
            "booking_date": self.booking_date,
            "total_price": self.total_price,
            "additional_notes": self.additional_notes,
            "payment_method": self.payment_method,
            "phone_number": self.phone_number,
        }
