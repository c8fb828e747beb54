from abc import abstractmethod
from contextlib import AbstractContextManager

from railway.inventory.domain.entity import Train
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import Money, Repository


class InventoryStore(Repository[Train, TrainNumber]):
    """座席在庫ストアのインターフェース

    列車の座席カウンタを排他的に所有し、確保・返却を原子的に行う。
    返す Train は常にコピーで、ストア内部の状態を直接触らせない。
    """

    @abstractmethod
    def save(self, train: Train) -> None:
        """新規列車を登録する（同じ列車番号があれば DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, train_number: TrainNumber) -> Train | None:
        """列車番号で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Train]:
        """全列車を取得"""
        raise NotImplementedError

    @abstractmethod
    def locked(self, train_number: TrainNumber) -> AbstractContextManager[None]:
        """列車ごとの排他区間（再入可能、未登録の列車なら TrainNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def reserve_seats(self, train_number: TrainNumber, count: int) -> Train:
        """空席確認と減算を1ステップで行う"""
        raise NotImplementedError

    @abstractmethod
    def release_seats(self, train_number: TrainNumber, count: int) -> None:
        """座席を返却する（列車が存在しなければ何もしない）"""
        raise NotImplementedError

    @abstractmethod
    def resize(self, train_number: TrainNumber, new_total: int) -> Train:
        """総座席数を変更し、空席数をリセットする"""
        raise NotImplementedError

    @abstractmethod
    def change_fare(self, train_number: TrainNumber, fare: Money) -> Train:
        """運賃を変更する"""
        raise NotImplementedError
