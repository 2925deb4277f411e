from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingStatusChanged
from services.booking.domain.value_object import BookingId, TotalPrice
from services.shared.domain import AggregateRoot, IsoDateTime
from services.shared.domain.exception import BusinessRuleViolationException

# 遷移先ステータス -> 遷移元として許可されるステータス
# CANCELLED / ARCHIVED は管理操作（スケジューラ）からの指示のため、全状態から許可する
_ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.CONFIRMED: frozenset({BookingStatus.PENDING}),
    BookingStatus.COMPLETED: frozenset({BookingStatus.CONFIRMED}),
    BookingStatus.CANCELLED: frozenset(BookingStatus),
    BookingStatus.ARCHIVED: frozenset(BookingStatus),
}


class Booking(AggregateRoot[BookingId]):
    """車両サービス予約

    ステータス以外の属性は生成後に変更しない。
    created_at / updated_at はリポジトリが保存時に設定する。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: str,
        vehicle_id: str,
        service_ids: list[str],
        booking_date: IsoDateTime,
        total_price: TotalPrice,
        status: BookingStatus = BookingStatus.PENDING,
        additional_notes: str | None = None,
        payment_method: str | None = None,
        phone_number: str | None = None,
        estimated_completion_time: IsoDateTime | None = None,
        actual_completion_time: IsoDateTime | None = None,
        created_at: IsoDateTime | None = None,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._vehicle_id = vehicle_id
        self._service_ids = tuple(service_ids)
        self._booking_date = booking_date
        self._total_price = total_price
        self._status = status
        self._additional_notes = additional_notes
        self._payment_method = payment_method
        self._phone_number = phone_number
        self._estimated_completion_time = estimated_completion_time
        self._actual_completion_time = actual_completion_time
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def vehicle_id(self) -> str:
        return self._vehicle_id

    @property
    def service_ids(self) -> list[str]:
        return list(self._service_ids)

    @property
    def booking_date(self) -> IsoDateTime:
        return self._booking_date

    @property
    def total_price(self) -> TotalPrice:
        return self._total_price

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def additional_notes(self) -> str | None:
        return self._additional_notes

    @property
    def payment_method(self) -> str | None:
        return self._payment_method

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def estimated_completion_time(self) -> IsoDateTime | None:
        return self._estimated_completion_time

    @property
    def actual_completion_time(self) -> IsoDateTime | None:
        return self._actual_completion_time

    @property
    def created_at(self) -> IsoDateTime | None:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime | None:
        return self._updated_at

    def confirm(self) -> None:
        """予約を確定する（PENDING からのみ）"""
        self._transition_to(BookingStatus.CONFIRMED)

    def complete(self) -> None:
        """作業完了にする（CONFIRMED からのみ）"""
        self._transition_to(BookingStatus.COMPLETED)

    def cancel(self) -> None:
        """予約をキャンセルする（現在の状態は問わない）"""
        self._transition_to(BookingStatus.CANCELLED)

    def archive(self) -> None:
        """予約をアーカイブする（現在の状態は問わない）"""
        self._transition_to(BookingStatus.ARCHIVED)

    def can_transition_to(self, target: BookingStatus) -> bool:
        """指定のステータスへ遷移できるかどうか"""
        if target == self._status:
            return True
        return self._status in _ALLOWED_TRANSITIONS.get(target, frozenset())

    def _transition_to(self, target: BookingStatus) -> None:
        """ステータスを遷移させ、変更があればドメインイベントを記録する

        同じステータスへの遷移は何もしない（冪等）。
        """
        if target == self._status:
            return
        if not self.can_transition_to(target):
            raise BusinessRuleViolationException(
                f"Cannot change booking status from {self._status.value} "
                f"to {target.value}"
            )
        previous = self._status
        self._status = target
        self.add_domain_event(
            BookingStatusChanged(
                booking_id=self.id,
                previous_status=previous,
                new_status=target,
            )
        )
