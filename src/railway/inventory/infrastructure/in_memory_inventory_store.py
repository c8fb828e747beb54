from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock

from railway.inventory.domain.entity import Train
from railway.inventory.domain.exception import TrainNotFoundException
from railway.inventory.domain.repository import InventoryStore
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import Money
from railway.shared.domain.exception import DuplicateResourceException
from railway.shared.utils import get_logger

logger = get_logger("inventory")


class InMemoryInventoryStore(InventoryStore):
    """プロセス内メモリを使用した InventoryStore の具象実装

    ロックは2種類:
    - _registry_lock: 列車の索引（dict）の追加・参照
    - 列車ごとの RLock: 空席数・総座席数・運賃の読み書き

    列車ロックは save で登録した列車にだけ作る。未登録の列車番号には
    ロックを作らないので、問い合わせで _locks が増えることはない。
    _registry_lock を保持したまま列車ロックを待たない。
    """

    def __init__(self) -> None:
        self._trains: dict[TrainNumber, Train] = {}
        self._locks: dict[TrainNumber, RLock] = {}
        self._registry_lock = RLock()

    def _lock_for(self, train_number: TrainNumber) -> RLock | None:
        with self._registry_lock:
            return self._locks.get(train_number)

    def _get(self, train_number: TrainNumber) -> Train | None:
        with self._registry_lock:
            return self._trains.get(train_number)

    def _require(self, train_number: TrainNumber) -> Train:
        train = self._get(train_number)
        if train is None:
            raise TrainNotFoundException(train_number)
        return train

    @contextmanager
    def locked(self, train_number: TrainNumber) -> Iterator[None]:
        """列車ごとの排他区間（未登録の列車なら TrainNotFoundException）"""
        lock = self._lock_for(train_number)
        if lock is None:
            raise TrainNotFoundException(train_number)
        with lock:
            yield

    def save(self, train: Train) -> None:
        """新規列車を登録する"""
        with self._registry_lock:
            if train.id in self._trains:
                raise DuplicateResourceException(f"Train already exists: {train.id}")
            self._trains[train.id] = train.clone()
            self._locks[train.id] = RLock()

    def find_by_id(self, train_number: TrainNumber) -> Train | None:
        """列車番号で検索"""
        lock = self._lock_for(train_number)
        if lock is None:
            return None
        with lock:
            return self._require(train_number).clone()

    def find_all(self) -> list[Train]:
        """全列車を列車番号順で取得"""
        with self._registry_lock:
            numbers = sorted(self._trains)

        trains = []
        for number in numbers:
            train = self.find_by_id(number)
            if train is not None:
                trains.append(train)
        return trains

    def reserve_seats(self, train_number: TrainNumber, count: int) -> Train:
        """空席確認と減算を列車ロック内で行う"""
        with self.locked(train_number):
            train = self._require(train_number)
            train.reserve_seats(count)
            return train.clone()

    def release_seats(self, train_number: TrainNumber, count: int) -> None:
        """座席を返却する"""
        lock = self._lock_for(train_number)
        if lock is None:
            logger.warning(
                "Seat release skipped for unknown train",
                extra={"train_number": train_number.value, "seats": count},
            )
            return
        with lock:
            self._require(train_number).release_seats(count)

    def resize(self, train_number: TrainNumber, new_total: int) -> Train:
        """総座席数を変更し、空席数をリセットする"""
        with self.locked(train_number):
            train = self._require(train_number)
            previous_total = train.total_seats
            previous_available = train.available_seats
            train.resize(new_total)
            resized = train.clone()

        logger.warning(
            "Train capacity reset; outstanding reservations are not reconciled",
            extra={
                "train_number": train_number.value,
                "previous_total": previous_total,
                "previous_available": previous_available,
                "new_total": new_total,
            },
        )
        return resized

    def change_fare(self, train_number: TrainNumber, fare: Money) -> Train:
        """運賃を変更する"""
        with self.locked(train_number):
            train = self._require(train_number)
            train.change_fare(fare)
            return train.clone()
