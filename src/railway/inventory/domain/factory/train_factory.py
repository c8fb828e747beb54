from decimal import Decimal, InvalidOperation
from typing import TypedDict

from railway.inventory.domain.entity import Train
from railway.inventory.domain.value_object import Route, TrainName, TrainNumber
from railway.shared.domain import Currency, Money
from railway.shared.domain.exception import InvalidInputException


class TrainDetails(TypedDict):
    """列車詳細の入力データ構造"""

    train_number: int
    train_name: str
    source: str
    destination: str
    fare_amount: Decimal
    total_seats: int


class TrainFactory:
    """列車エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 初期状態の設定（空席数 = 総座席数）
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.inr()

    def create(self, details: TrainDetails) -> Train:
        """新規列車エンティティを生成する

        Value Object の ValueError は InvalidInputException に変換する。
        """
        try:
            return Train(
                id=TrainNumber(details["train_number"]),
                name=TrainName(details["train_name"]),
                route=Route(
                    source=details["source"],
                    destination=details["destination"],
                ),
                fare=self.fare(details["fare_amount"]),
                total_seats=details["total_seats"],
            )
        except ValueError as e:
            raise InvalidInputException(str(e)) from e

    def fare(self, amount: Decimal | int | str) -> Money:
        """設定通貨で運賃を生成する"""
        try:
            return Money(amount=Decimal(str(amount)), currency=self._currency)
        except (ValueError, InvalidOperation) as e:
            raise InvalidInputException(f"Invalid fare: {amount}") from e
