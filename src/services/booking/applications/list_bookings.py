from aws_lambda_powertools import Logger

from services.booking.applications.booking_enricher import BookingEnricher
from services.booking.applications.dto import BookingResponse
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.shared.domain.exception import ValidationException
from services.shared.utils import get_logger


class BookingQueryService:
    """予約一覧取得サービス

    取得した予約はすべて BookingEnricher で表示名を付与して返す。
    並び順はリポジトリの返却順のまま並べ替えない。
    """

    def __init__(
        self,
        repository: BookingRepository,
        enricher: BookingEnricher,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._enricher = enricher
        self._logger = logger if logger is not None else get_logger()

    def list_by_user(self, user_id: str) -> list[BookingResponse]:
        """ユーザーの予約一覧を取得する（該当なしは空リスト）"""
        bookings = self._repository.find_by_user_id(user_id)
        return self._enricher.enrich_all(bookings)

    def list_by_status(self, status_text: str) -> list[BookingResponse]:
        """ステータスで予約一覧を取得する

        Raises:
            ValidationException: ステータス文字列がどの状態にも一致しない場合
        """
        status = BookingStatus.parse(status_text)
        if status is None:
            self._logger.warning(
                "Invalid status requested", extra={"status": status_text}
            )
            raise ValidationException(f"Unrecognized status: {status_text}")

        bookings = self._repository.find_by_status(status)
        return self._enricher.enrich_all(bookings)

    def list_bookings(
        self, user_id: str | None = None, status: str | None = None
    ) -> list[BookingResponse]:
        """検索条件に応じて一覧を取得する

        user_id が指定されていれば status は無視する。
        どちらも指定されていなければ ValidationException。
        """
        if user_id:
            return self.list_by_user(user_id)
        if status is not None:
            return self.list_by_status(status)
        raise ValidationException("Either user_id or status is required")
