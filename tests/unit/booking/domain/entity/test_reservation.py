import pytest

from railway.booking.domain.entity import Reservation
from railway.booking.domain.value_object import Pnr, TrainSnapshot
from railway.shared.domain import Money
from railway.shared.domain.exception import InvalidInputException


class TestReservation:
    """Reservation Entity のテスト"""

    def test_seat_count_matches_passengers(self, create_train, create_passengers, user_id):
        reservation = Reservation(
            id=Pnr(100001),
            train=TrainSnapshot.from_train(create_train()),
            passengers=create_passengers(3),
            owner_id=user_id,
        )

        assert reservation.pnr == Pnr(100001)
        assert reservation.seat_count == 3
        assert reservation.total_fare == Money.inr("4500.00")

    def test_passengers_keep_order(self, create_train, create_passengers, user_id):
        passengers = create_passengers(2)
        reservation = Reservation(
            id=Pnr(100001),
            train=TrainSnapshot.from_train(create_train()),
            passengers=passengers,
            owner_id=user_id,
        )
        assert reservation.passengers == tuple(passengers)

    def test_no_passengers_raises_error(self, create_train, user_id):
        with pytest.raises(InvalidInputException):
            Reservation(
                id=Pnr(100001),
                train=TrainSnapshot.from_train(create_train()),
                passengers=[],
                owner_id=user_id,
            )

    def test_is_owned_by(self, create_train, create_passengers, user_id, other_user_id):
        reservation = Reservation(
            id=Pnr(100001),
            train=TrainSnapshot.from_train(create_train()),
            passengers=create_passengers(),
            owner_id=user_id,
        )
        assert reservation.is_owned_by(user_id)
        assert not reservation.is_owned_by(other_user_id)

    def test_snapshot_is_not_affected_by_train_changes(
        self, create_train, create_passengers, user_id
    ):
        """予約後に列車の運賃が変わっても予約の運賃は変わらない"""
        train = create_train()
        reservation = Reservation(
            id=Pnr(100001),
            train=TrainSnapshot.from_train(train),
            passengers=create_passengers(),
            owner_id=user_id,
        )

        train.change_fare(Money.inr(1))

        assert reservation.train.fare == Money.inr("1500.00")
