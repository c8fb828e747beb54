from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock

from railway.booking.domain.entity import Reservation
from railway.booking.domain.repository import BookingLedger
from railway.booking.domain.value_object import Pnr
from railway.shared.domain import UserId
from railway.shared.domain.exception import DuplicateResourceException


def _by_pnr(item: tuple[Pnr, Reservation]) -> Pnr:
    return item[0]


class InMemoryBookingLedger(BookingLedger):
    """プロセス内メモリを使用した BookingLedger の具象実装

    Reservation は不変なので、一覧はロック内で取ったリストをそのまま返す。
    """

    def __init__(self) -> None:
        self._reservations: dict[Pnr, Reservation] = {}
        self._lock = RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def save(self, reservation: Reservation) -> None:
        """予約を登録する"""
        with self._lock:
            if reservation.id in self._reservations:
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                )
            self._reservations[reservation.id] = reservation

    def find_by_id(self, pnr: Pnr) -> Reservation | None:
        """PNR で検索"""
        with self._lock:
            return self._reservations.get(pnr)

    def exists(self, pnr: Pnr) -> bool:
        with self._lock:
            return pnr in self._reservations

    def remove(self, pnr: Pnr) -> Reservation | None:
        """予約を削除する"""
        with self._lock:
            return self._reservations.pop(pnr, None)

    def find_by_owner(self, owner_id: UserId) -> list[Reservation]:
        """利用者の予約を PNR 昇順で取得"""
        with self._lock:
            return [
                reservation
                for _, reservation in sorted(self._reservations.items(), key=_by_pnr)
                if reservation.is_owned_by(owner_id)
            ]

    def find_all(self) -> list[Reservation]:
        """全予約を PNR 昇順で取得"""
        with self._lock:
            return [
                reservation
                for _, reservation in sorted(self._reservations.items(), key=_by_pnr)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._reservations)
