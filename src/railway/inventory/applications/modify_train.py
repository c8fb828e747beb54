from decimal import Decimal

from railway.inventory.domain.entity import Train
from railway.inventory.domain.exception import TrainNotFoundException
from railway.inventory.domain.factory import TrainFactory
from railway.inventory.domain.repository import InventoryStore
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import Caller
from railway.shared.domain.exception import InvalidInputException
from railway.shared.utils import get_logger

logger = get_logger("inventory")


class ModifyTrainService:
    """列車変更ユースケース（管理者のみ）

    運賃と総座席数をそれぞれ任意で変更する。
    総座席数の変更は空席数を新しい総座席数にリセットし、
    既存予約との整合は取らない。
    """

    def __init__(self, store: InventoryStore, factory: TrainFactory) -> None:
        self._store = store
        self._factory = factory

    def modify(
        self,
        caller: Caller,
        train_number: TrainNumber,
        fare_amount: Decimal | None = None,
        total_seats: int | None = None,
    ) -> Train:
        """列車の運賃・総座席数を変更する"""
        caller.require_admin()

        if total_seats is not None and total_seats < 0:
            raise InvalidInputException("Total seats cannot be negative")

        with self._store.locked(train_number):
            train = self._store.find_by_id(train_number)
            if train is None:
                raise TrainNotFoundException(train_number)

            if fare_amount is not None:
                train = self._store.change_fare(
                    train_number, self._factory.fare(fare_amount)
                )
                logger.info(
                    "Train fare changed",
                    extra={"train_number": train_number.value, "fare": str(train.fare)},
                )

            if total_seats is not None:
                train = self._store.resize(train_number, total_seats)

        return train

    def resize(self, caller: Caller, train_number: TrainNumber, new_total: int) -> Train:
        """総座席数のみ変更する"""
        return self.modify(caller, train_number, total_seats=new_total)
