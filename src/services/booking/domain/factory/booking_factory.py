from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import NotRequired, TypedDict

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, TotalPrice
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import ValidationException
from services.shared.utils import is_blank, to_decimal


class BookingDetails(TypedDict):
    """予約作成の入力データ構造"""

    user_id: str | None
    vehicle_id: str | None
    service_ids: list[str] | None
    booking_date: datetime | str | None
    total_price: Decimal
    additional_notes: NotRequired[str | None]
    payment_method: NotRequired[str | None]
    phone_number: NotRequired[str | None]


class BookingFactory:
    """予約エンティティのファクトリ

    - 入力値の検証（必須項目・予約日時が未来であること）
    - プリミティブ型から Value Object への変換
    - 初期状態(PENDING)の設定
    """

    def __init__(self, clock: Callable[[], IsoDateTime] = IsoDateTime.now) -> None:
        self._clock = clock

    def create(self, booking_id: BookingId, details: BookingDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            booking_id: リポジトリが採番した予約ID
            details: 予約の入力データ

        Returns:
            Booking: 生成された予約エンティティ（PENDING状態）

        Raises:
            ValidationException: 必須項目の欠落、予約日時が未来でない、金額が不正な場合
        """
        user_id = self._to_text(details.get("user_id"))
        vehicle_id = self._to_text(details.get("vehicle_id"))
        service_ids = details.get("service_ids")
        raw_booking_date = details.get("booking_date")

        if is_blank(user_id):
            raise ValidationException("User ID is required")
        if is_blank(vehicle_id):
            raise ValidationException("Vehicle ID is required")
        # 空リストは許可し、None のみ拒否する
        if service_ids is None:
            raise ValidationException("Service IDs are required")
        if raw_booking_date is None:
            raise ValidationException("Booking date is required")

        try:
            booking_date = self._to_iso_date_time(raw_booking_date)
            total_price = TotalPrice(to_decimal(details["total_price"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationException(f"Invalid booking details: {e}") from e

        if not booking_date.is_after(self._clock()):
            raise ValidationException("Booking date must be in the future")

        return Booking(
            id=booking_id,
            user_id=user_id,
            vehicle_id=vehicle_id,
            service_ids=list(service_ids),
            booking_date=booking_date,
            total_price=total_price,
            status=BookingStatus.PENDING,
            additional_notes=details.get("additional_notes"),
            payment_method=details.get("payment_method"),
            phone_number=details.get("phone_number"),
        )

    @staticmethod
    def _to_iso_date_time(value: datetime | str) -> IsoDateTime:
        if isinstance(value, datetime):
            return IsoDateTime(value=value)
        return IsoDateTime.from_string(value)

    @staticmethod
    def _to_text(value: object) -> str | None:
        # UUID などの識別子オブジェクトは文字列として扱う
        return None if value is None else str(value)
