from collections.abc import Sequence

from railway.booking.domain.entity import Reservation
from railway.booking.domain.exception import ReservationNotFoundException
from railway.booking.domain.factory import ReservationFactory
from railway.booking.domain.repository import BookingLedger
from railway.booking.domain.service import PnrAllocator
from railway.booking.domain.value_object import Passenger, Pnr
from railway.inventory.domain.exception import TrainNotFoundException
from railway.inventory.domain.repository import InventoryStore
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import Caller, UserId
from railway.shared.domain.exception import (
    AuthorizationException,
    InvalidInputException,
)
from railway.shared.utils import get_logger

logger = get_logger("booking")


class ReservationService:
    """予約ユースケース（予約・取消・一覧）

    InventoryStore / PnrAllocator / BookingLedger を組み合わせ、
    予約と取消を all-or-nothing で行う。
    ロックの取得順は常に 列車ロック → 台帳ロック。
    """

    def __init__(
        self,
        store: InventoryStore,
        ledger: BookingLedger,
        allocator: PnrAllocator,
        factory: ReservationFactory,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._allocator = allocator
        self._factory = factory

    def book(
        self,
        train_number: TrainNumber,
        user_id: UserId,
        passengers: Sequence[Passenger],
    ) -> Reservation:
        """乗客分の座席を確保して予約を作成する

        失敗した場合、確保済みの座席は返却してから例外を送出する。
        """
        if self._store.find_by_id(train_number) is None:
            raise TrainNotFoundException(train_number)
        if len(passengers) < 1:
            raise InvalidInputException("At least one passenger is required")

        seats = len(passengers)
        with self._store.locked(train_number):
            train = self._store.reserve_seats(train_number, seats)
            try:
                with self._ledger.locked():
                    pnr = self._allocator.allocate()
                    reservation = self._factory.create(pnr, train, passengers, user_id)
                    self._ledger.save(reservation)
            except Exception:
                # 補償処理: 確保した座席を戻す
                self._store.release_seats(train_number, seats)
                logger.warning(
                    "Booking rolled back",
                    extra={"train_number": train_number.value, "seats": seats},
                )
                raise

        logger.info(
            "Reservation booked",
            extra={
                "pnr": reservation.id.value,
                "train_number": train_number.value,
                "seats": seats,
                "available_seats": train.available_seats,
            },
        )
        return reservation

    def cancel(self, pnr: Pnr, user_id: UserId) -> Reservation:
        """予約を取り消し、座席を列車に返却する

        台帳からの削除と座席の返却は同じ列車ロックの中で行う。
        """
        while True:
            reservation = self._find_owned(pnr, user_id)
            with self._store.locked(reservation.train_number):
                if self._remove_if_current(reservation):
                    self._store.release_seats(
                        reservation.train_number, reservation.seat_count
                    )
                    break

        logger.info(
            "Reservation cancelled",
            extra={
                "pnr": pnr.value,
                "train_number": reservation.train_number.value,
                "seats": reservation.seat_count,
            },
        )
        return reservation

    def get(self, pnr: Pnr, user_id: UserId) -> Reservation:
        """自分の予約を1件取得する"""
        return self._find_owned(pnr, user_id)

    def list_mine(self, user_id: UserId) -> list[Reservation]:
        """自分の予約一覧"""
        return self._ledger.find_by_owner(user_id)

    def list_all(self, caller: Caller) -> list[Reservation]:
        """全予約一覧（管理者のみ）"""
        caller.require_admin()
        return self._ledger.find_all()

    def _find_owned(self, pnr: Pnr, user_id: UserId) -> Reservation:
        reservation = self._ledger.find_by_id(pnr)
        if reservation is None:
            raise ReservationNotFoundException(pnr)
        if not reservation.is_owned_by(user_id):
            raise AuthorizationException(
                f"User {user_id} is not allowed to access reservation {pnr}"
            )
        return reservation

    def _remove_if_current(self, reservation: Reservation) -> bool:
        """取得時から台帳が変わっていなければ削除する"""
        with self._ledger.locked():
            if self._ledger.find_by_id(reservation.id) is not reservation:
                return False
            self._ledger.remove(reservation.id)
            return True
