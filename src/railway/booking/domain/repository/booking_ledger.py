from abc import abstractmethod
from contextlib import AbstractContextManager

from railway.booking.domain.entity import Reservation
from railway.booking.domain.value_object import Pnr
from railway.shared.domain import Repository, UserId


class BookingLedger(Repository[Reservation, Pnr]):
    """予約台帳のインターフェース

    有効な予約をすべて保持する。キー（PNR）は一意。
    一覧は PNR の昇順で返すが、ロジックは順序に依存しない。
    """

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """予約を登録する（同じ PNR があれば DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, pnr: Pnr) -> Reservation | None:
        """PNR で検索"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, pnr: Pnr) -> bool:
        """PNR が使用中か"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, pnr: Pnr) -> Reservation | None:
        """予約を削除し、削除したレコードを返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_owner(self, owner_id: UserId) -> list[Reservation]:
        """利用者の予約一覧"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全予約一覧"""
        raise NotImplementedError

    @abstractmethod
    def locked(self) -> AbstractContextManager[None]:
        """台帳の排他区間（再入可能）"""
        raise NotImplementedError
