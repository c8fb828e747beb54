from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """運賃などの金額

    予約時に列車の運賃をそのまま保持し、乗客数を掛けて合計を出す。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValueError(f"Amount must be a Decimal: {self.amount!r}")
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be finite: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, times: int) -> "Money":
        """乗客数分の金額"""
        if times < 0:
            raise ValueError("Multiplier cannot be negative")
        return Money(amount=self.amount * times, currency=self.currency)

    @classmethod
    def inr(cls, amount: Decimal | int | str) -> "Money":
        return cls(amount=Decimal(str(amount)), currency=Currency.inr())
