from collections.abc import Sequence
from typing import TypedDict

from railway.booking.domain.entity import Reservation
from railway.booking.domain.enum import Gender
from railway.booking.domain.value_object import Passenger, Pnr, TrainSnapshot
from railway.inventory.domain.entity import Train
from railway.shared.domain import UserId
from railway.shared.domain.exception import InvalidInputException


class PassengerDetails(TypedDict):
    """乗客の入力データ構造"""

    name: str
    age: int
    gender: str


class ReservationFactory:
    """予約エンティティのファクトリ

    - 列車のスナップショットを予約時点で固定する
    - プリミティブ型から Value Object への変換
    """

    def create(
        self,
        pnr: Pnr,
        train: Train,
        passengers: Sequence[Passenger],
        owner_id: UserId,
    ) -> Reservation:
        """新規予約エンティティを生成する"""
        return Reservation(
            id=pnr,
            train=TrainSnapshot.from_train(train),
            passengers=passengers,
            owner_id=owner_id,
        )

    def passengers(self, details: Sequence[PassengerDetails]) -> list[Passenger]:
        """入力データから乗客リストを生成する"""
        try:
            return [
                Passenger(
                    name=item["name"],
                    age=item["age"],
                    gender=Gender(item["gender"]),
                )
                for item in details
            ]
        except ValueError as e:
            raise InvalidInputException(str(e)) from e
