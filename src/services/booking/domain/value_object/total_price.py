from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TotalPrice:
    """予約の合計金額（0 以上）"""

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("Total price must be a finite number")
        if self.amount < 0:
            raise ValueError("Total price cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)
