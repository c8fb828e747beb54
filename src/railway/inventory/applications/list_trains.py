from collections.abc import Callable
from typing import Any

from railway.inventory.domain.entity import Train
from railway.inventory.domain.enum import TrainSortKey
from railway.inventory.domain.exception import TrainNotFoundException
from railway.inventory.domain.repository import InventoryStore
from railway.inventory.domain.value_object import TrainNumber

_SORT_KEYS: dict[TrainSortKey, Callable[[Train], Any]] = {
    TrainSortKey.NUMBER: lambda train: train.id,
    TrainSortKey.FARE: lambda train: (train.fare.amount, train.id),
    TrainSortKey.NAME: lambda train: (str(train.name), train.id),
}


class ListTrainsService:
    """列車参照ユースケース"""

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def get(self, train_number: TrainNumber) -> Train:
        """列車番号で1件取得する"""
        train = self._store.find_by_id(train_number)
        if train is None:
            raise TrainNotFoundException(train_number)
        return train

    def list(self, sort_key: TrainSortKey = TrainSortKey.NUMBER) -> list[Train]:
        """全列車を指定の並び順で取得する"""
        return sorted(self._store.find_all(), key=_SORT_KEYS[sort_key])
