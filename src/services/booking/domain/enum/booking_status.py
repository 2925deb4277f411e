from __future__ import annotations

from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス"""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"

    @classmethod
    def parse(cls, text: str | None) -> BookingStatus | None:
        """文字列をステータスに変換する（大文字・小文字は区別しない）

        一致するステータスがなければ例外ではなく None を返す。
        前後の空白は除去しない（" pending " は不一致）。
        """
        if text is None:
            return None
        folded = text.casefold()
        for status in cls:
            if status.value.casefold() == folded:
                return status
        return None
