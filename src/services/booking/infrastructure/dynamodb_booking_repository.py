import os
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, TotalPrice
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    DependencyException,
    DuplicateResourceException,
    ResourceNotFoundException,
)

METADATA_SK = "METADATA"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - ベーステーブル: PK=BOOKING#<id>, SK=METADATA
    - GSI1 (ユーザー別): GSI1PK=USER#<user_id>, GSI1SK=<created_at>
    - GSI2 (ステータス別): GSI2PK=STATUS#<status>, GSI2SK=<created_at>
    """

    def __init__(
        self,
        table_name: str | None = None,
        table: Any | None = None,
        user_index_name: str | None = None,
        status_index_name: str | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.user_index_name = user_index_name or os.getenv("USER_INDEX_NAME", "GSI1")
        self.status_index_name = status_index_name or os.getenv(
            "STATUS_INDEX_NAME", "GSI2"
        )
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def next_id(self) -> BookingId:
        return BookingId.generate()

    def save(self, booking: Booking) -> Booking:
        """予約をDBに保存する"""
        now = IsoDateTime.now()
        item = self._to_item(booking, created_at=now, updated_at=now)
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise DependencyException(f"Failed to save booking: {booking.id}") from e
        except BotoCoreError as e:
            raise DependencyException(f"Failed to save booking: {booking.id}") from e
        return self._to_entity(item)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"BOOKING#{booking_id}", "SK": METADATA_SK},
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise DependencyException(f"Failed to get booking: {booking_id}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update(self, booking: Booking) -> Booking:
        """予約のステータスと更新日時を更新する

        ステータス別インデックスのキーもあわせて書き換える。
        """
        now = IsoDateTime.now()
        try:
            response = self.table.update_item(
                Key={"PK": f"BOOKING#{booking.id}", "SK": METADATA_SK},
                UpdateExpression=(
                    "SET #status = :status, #updated_at = :updated_at, "
                    "GSI2PK = :gsi2pk"
                ),
                ExpressionAttributeNames={
                    "#status": "status",
                    "#updated_at": "updated_at",
                },
                ExpressionAttributeValues={
                    ":status": booking.status.value,
                    ":updated_at": str(now),
                    ":gsi2pk": f"STATUS#{booking.status.value}",
                },
                ConditionExpression=Attr("PK").exists(),
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Booking not found: {booking.id}"
                ) from e
            raise DependencyException(f"Failed to update booking: {booking.id}") from e
        except BotoCoreError as e:
            raise DependencyException(f"Failed to update booking: {booking.id}") from e
        return self._to_entity(response["Attributes"])

    def find_by_user_id(self, user_id: str) -> list[Booking]:
        """ユーザーIDで検索（作成日時の昇順）"""
        return self._query_index(
            self.user_index_name, Key("GSI1PK").eq(f"USER#{user_id}")
        )

    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        """ステータスで検索（作成日時の昇順）"""
        return self._query_index(
            self.status_index_name, Key("GSI2PK").eq(f"STATUS#{status.value}")
        )

    def _query_index(
        self, index_name: str, key_condition: ConditionBase
    ) -> list[Booking]:
        """GSI をページングしながらすべて取得する"""
        kwargs: dict = {
            "IndexName": index_name,
            "KeyConditionExpression": key_condition,
        }
        items: list[dict] = []
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            raise DependencyException(f"Failed to query index: {index_name}") from e
        return [self._to_entity(item) for item in items]

    def _to_item(
        self, booking: Booking, created_at: IsoDateTime, updated_at: IsoDateTime
    ) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"BOOKING#{booking.id}",
            "SK": METADATA_SK,
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": booking.user_id,
            "vehicle_id": booking.vehicle_id,
            "service_ids": booking.service_ids,
            "booking_date": str(booking.booking_date),
            "status": booking.status.value,
            "total_price": str(booking.total_price.amount),
            "additional_notes": booking.additional_notes,
            "payment_method": booking.payment_method,
            "phone_number": booking.phone_number,
            "estimated_completion_time": _optional_str(
                booking.estimated_completion_time
            ),
            "actual_completion_time": _optional_str(booking.actual_completion_time),
            "created_at": str(created_at),
            "updated_at": str(updated_at),
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": str(created_at),
            "GSI2PK": f"STATUS#{booking.status.value}",
            "GSI2SK": str(created_at),
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=item["user_id"],
            vehicle_id=item["vehicle_id"],
            service_ids=list(item.get("service_ids") or []),
            booking_date=IsoDateTime.from_string(item["booking_date"]),
            total_price=TotalPrice(Decimal(item["total_price"])),
            status=BookingStatus(item["status"]),
            additional_notes=item.get("additional_notes"),
            payment_method=item.get("payment_method"),
            phone_number=item.get("phone_number"),
            estimated_completion_time=_optional_iso(
                item.get("estimated_completion_time")
            ),
            actual_completion_time=_optional_iso(item.get("actual_completion_time")),
            created_at=_optional_iso(item.get("created_at")),
            updated_at=_optional_iso(item.get("updated_at")),
        )


def _optional_str(value: IsoDateTime | None) -> str | None:
    return str(value) if value is not None else None


def _optional_iso(value: str | None) -> IsoDateTime | None:
    return IsoDateTime.from_string(value) if value else None
