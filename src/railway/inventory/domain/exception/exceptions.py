from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class TrainNotFoundException(ResourceNotFoundException):
    """列車が見つからない場合"""

    error_code = "TRAIN_NOT_FOUND"

    def __init__(self, train_number: TrainNumber) -> None:
        super().__init__(f"Train not found: {train_number}")
        self.train_number = train_number


class InsufficientInventoryException(BusinessRuleViolationException):
    """空席数が要求座席数に満たない場合

    呼び出し元が報告できるよう、その時点の空席数を保持する。
    """

    error_code = "INSUFFICIENT_INVENTORY"

    def __init__(self, train_number: TrainNumber, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough seats on train {train_number}: "
            f"requested {requested}, only {available} left"
        )
        self.train_number = train_number
        self.requested = requested
        self.available = available

    @property
    def details(self) -> list | None:
        return [
            {
                "train_number": self.train_number.value,
                "requested": self.requested,
                "available": self.available,
            }
        ]
