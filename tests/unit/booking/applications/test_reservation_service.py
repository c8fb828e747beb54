import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from railway.booking.applications.reservation_service import ReservationService
from railway.booking.domain.exception import (
    PnrSpaceExhaustedException,
    ReservationNotFoundException,
)
from railway.booking.domain.factory import ReservationFactory
from railway.booking.domain.service import PnrAllocator
from railway.booking.domain.value_object import Pnr
from railway.booking.infrastructure import InMemoryBookingLedger
from railway.container import build_container
from railway.inventory.domain.exception import (
    InsufficientInventoryException,
    TrainNotFoundException,
)
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.config import Settings
from railway.shared.domain import Money, UserId
from railway.shared.domain.exception import (
    AuthorizationException,
    InvalidInputException,
)

TRAIN = TrainNumber(12049)


class FailingLedger(InMemoryBookingLedger):
    """登録に必ず失敗する台帳"""

    def save(self, reservation):
        raise RuntimeError("ledger unavailable")


@pytest.fixture
def service(container, store, create_train):
    store.save(create_train(total_seats=10))
    return container.reservation_service


def available(store) -> int:
    return store.find_by_id(TRAIN).available_seats


class TestBook:
    def test_book_reserves_seats(self, service, store, ledger, user_id, create_passengers):
        reservation = service.book(TRAIN, user_id, create_passengers(3))

        assert reservation.seat_count == 3
        assert reservation.owner_id == user_id
        assert 100000 <= reservation.pnr.value <= 999999
        assert available(store) == 7
        assert ledger.find_by_id(reservation.pnr) is reservation

    def test_unknown_train(self, service, user_id, create_passengers):
        with pytest.raises(TrainNotFoundException):
            service.book(TrainNumber(1), user_id, create_passengers())

    def test_no_passengers(self, service, store, ledger, user_id):
        with pytest.raises(InvalidInputException):
            service.book(TRAIN, user_id, [])
        assert available(store) == 10
        assert len(ledger) == 0

    def test_overbooking_leaves_inventory_unchanged(
        self, service, store, ledger, user_id, create_passengers
    ):
        with pytest.raises(InsufficientInventoryException) as exc_info:
            service.book(TRAIN, user_id, create_passengers(11))

        assert exc_info.value.available == 10
        assert available(store) == 10
        assert len(ledger) == 0

    def test_ledger_failure_rolls_back_seats(self, store, create_train, user_id, create_passengers):
        """台帳への登録に失敗した場合、確保した座席は返却される"""
        store.save(create_train(total_seats=10))
        ledger = FailingLedger()
        service = ReservationService(
            store=store,
            ledger=ledger,
            allocator=PnrAllocator(ledger, rng=random.Random(0)),
            factory=ReservationFactory(),
        )

        with pytest.raises(RuntimeError):
            service.book(TRAIN, user_id, create_passengers(4))

        assert available(store) == 10

    def test_exhausted_pnr_space_rolls_back_seats(
        self, store, ledger, create_train, user_id, create_passengers
    ):
        store.save(create_train(total_seats=10))
        container = build_container(
            settings=Settings(pnr_lower=1, pnr_upper=1), store=store, ledger=ledger
        )
        service = container.reservation_service
        service.book(TRAIN, user_id, create_passengers())

        with pytest.raises(PnrSpaceExhaustedException):
            service.book(TRAIN, user_id, create_passengers(2))

        assert available(store) == 9
        assert len(ledger) == 1

    def test_fare_change_does_not_affect_booked_reservation(
        self, service, store, user_id, create_passengers
    ):
        reservation = service.book(TRAIN, user_id, create_passengers(2))

        store.change_fare(TRAIN, Money.inr(99))

        assert service.get(reservation.pnr, user_id).train.fare == Money.inr("1500.00")
        assert reservation.total_fare == Money.inr("3000.00")


class TestCancel:
    def test_book_then_cancel_restores_inventory(
        self, service, store, ledger, user_id, create_passengers
    ):
        reservation = service.book(TRAIN, user_id, create_passengers(4))

        cancelled = service.cancel(reservation.pnr, user_id)

        assert cancelled is reservation
        assert available(store) == 10
        assert len(ledger) == 0

    def test_non_owner_cannot_cancel(
        self, service, store, ledger, user_id, other_user_id, create_passengers
    ):
        reservation = service.book(TRAIN, user_id, create_passengers(2))

        with pytest.raises(AuthorizationException):
            service.cancel(reservation.pnr, other_user_id)

        assert available(store) == 8
        assert ledger.exists(reservation.pnr)

    def test_cancel_twice_raises_not_found(self, service, user_id, create_passengers):
        reservation = service.book(TRAIN, user_id, create_passengers())
        service.cancel(reservation.pnr, user_id)

        with pytest.raises(ReservationNotFoundException):
            service.cancel(reservation.pnr, user_id)

    def test_cancel_unknown_pnr(self, service, user_id):
        with pytest.raises(ReservationNotFoundException):
            service.cancel(Pnr(123), user_id)

    def test_cancel_after_resize_does_not_exceed_total(
        self, service, store, user_id, create_passengers
    ):
        """総座席数リセット後の取消でも空席数は総座席数を超えない"""
        reservation = service.book(TRAIN, user_id, create_passengers(3))
        store.resize(TRAIN, 5)

        service.cancel(reservation.pnr, user_id)

        assert available(store) == 5

    def test_concurrent_cancel_releases_seats_once(
        self, service, store, user_id, create_passengers
    ):
        reservation = service.book(TRAIN, user_id, create_passengers(2))
        store.reserve_seats(TRAIN, 5)

        def attempt(_):
            try:
                service.cancel(reservation.pnr, user_id)
                return True
            except ReservationNotFoundException:
                return False

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(attempt, range(8)))

        assert sum(results) == 1
        assert available(store) == 5


class TestQueries:
    def test_get_requires_owner(self, service, user_id, other_user_id, create_passengers):
        reservation = service.book(TRAIN, user_id, create_passengers())

        assert service.get(reservation.pnr, user_id) is reservation
        with pytest.raises(AuthorizationException):
            service.get(reservation.pnr, other_user_id)

    def test_list_mine(self, service, user_id, other_user_id, create_passengers):
        mine = service.book(TRAIN, user_id, create_passengers())
        service.book(TRAIN, other_user_id, create_passengers())

        assert service.list_mine(user_id) == [mine]

    def test_list_all_is_admin_only(
        self, service, admin, traveler, user_id, other_user_id, create_passengers
    ):
        service.book(TRAIN, user_id, create_passengers())
        service.book(TRAIN, other_user_id, create_passengers())

        reservations = service.list_all(admin)

        assert len(reservations) == 2
        assert reservations[0].pnr < reservations[1].pnr
        with pytest.raises(AuthorizationException):
            service.list_all(traveler)


class TestReservationScenario:
    def test_two_seat_train(self, container, store, create_train, create_passengers):
        """空席2の列車で予約・超過・取消・他人による取消を順に行う"""
        store.save(create_train(train_number=12951, total_seats=2))
        service = container.reservation_service
        number = TrainNumber(12951)
        user_a, user_b = UserId("a"), UserId("b")

        reservation = service.book(number, user_a, create_passengers(2))
        assert store.find_by_id(number).available_seats == 0

        with pytest.raises(InsufficientInventoryException) as exc_info:
            service.book(number, user_a, create_passengers(1))
        assert exc_info.value.available == 0

        service.cancel(reservation.pnr, user_a)
        assert store.find_by_id(number).available_seats == 2

        with pytest.raises(ReservationNotFoundException):
            service.cancel(reservation.pnr, user_b)

    def test_concurrent_bookings_never_oversell(self, container, store, create_train, create_passengers):
        """N席の列車に N件の同時予約はすべて成功し、次の1件は失敗する"""
        seats = 40
        store.save(create_train(train_number=22439, total_seats=seats))
        service = container.reservation_service
        number = TrainNumber(22439)

        def book(i):
            return service.book(number, UserId(f"user-{i}"), create_passengers(1))

        with ThreadPoolExecutor(max_workers=8) as executor:
            reservations = list(executor.map(book, range(seats)))

        assert len({r.pnr for r in reservations}) == seats
        assert store.find_by_id(number).available_seats == 0

        with pytest.raises(InsufficientInventoryException):
            service.book(number, UserId("late"), create_passengers(1))

    def test_concurrent_book_and_cancel_keep_seat_accounting(
        self, container, store, ledger, create_train, create_passengers
    ):
        """予約と取消を同時に行っても 空席数 + 有効な予約の座席数 = 総座席数"""
        total = 20
        store.save(create_train(train_number=12951, total_seats=total))
        service = container.reservation_service
        number = TrainNumber(12951)
        existing = [
            service.book(number, UserId(f"early-{i}"), create_passengers(2))
            for i in range(8)
        ]

        def cancel(reservation):
            service.cancel(reservation.pnr, reservation.owner_id)

        def book(i):
            try:
                service.book(number, UserId(f"late-{i}"), create_passengers(1 + i % 3))
            except InsufficientInventoryException:
                pass

        with ThreadPoolExecutor(max_workers=12) as executor:
            futures = [executor.submit(cancel, r) for r in existing]
            futures += [executor.submit(book, i) for i in range(30)]
            for future in futures:
                future.result()

        available = store.find_by_id(number).available_seats
        live = [r for r in ledger.find_all() if r.train_number == number]

        assert 0 <= available <= total
        assert available + sum(r.seat_count for r in live) == total
        assert all(ledger.find_by_id(r.pnr) is not r for r in existing)
