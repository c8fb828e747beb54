from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """集約ストアの基底クラス

    実装はプロセス内メモリでもよい。
    返す集約はストア内部の状態と共有しないこと（コピーか不変オブジェクト）。
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を登録する（ID が重複すれば DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """ID で検索し、なければ None"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """全件を ID の昇順で取得"""
        raise NotImplementedError
