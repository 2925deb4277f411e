from abc import abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum.booking_status import BookingStatus
from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース

    - 予約IDの採番と、作成日時・更新日時の付与はリポジトリの責務
    - 一覧取得の並び順はストアの返却順（作成順）とする
    """

    @abstractmethod
    def next_id(self) -> BookingId:
        """新しい予約IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """予約を新規保存し、タイムスタンプ付与後の予約を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> Booking:
        """予約のステータスを更新し、更新後の予約を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> list[Booking]:
        """ユーザーIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        """ステータスで検索する"""
        raise NotImplementedError
