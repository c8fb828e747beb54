from collections.abc import Sequence

from railway.booking.domain.value_object import Passenger, Pnr, TrainSnapshot
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import AggregateRoot, Money, UserId
from railway.shared.domain.exception import InvalidInputException


class Reservation(AggregateRoot[Pnr]):
    """予約（旧: 乗車券）

    生成後は変更されない。乗客数 = 予約時に確保した座席数。
    """

    def __init__(
        self,
        id: Pnr,
        train: TrainSnapshot,
        passengers: Sequence[Passenger],
        owner_id: UserId,
    ) -> None:
        super().__init__(id)

        self._train = train
        self._passengers = tuple(passengers)
        self._owner_id = owner_id

        self._validate_passengers()

    def _validate_passengers(self) -> None:
        """乗客は1人以上"""
        if not self._passengers:
            raise InvalidInputException("Reservation requires at least one passenger")

    @property
    def pnr(self) -> Pnr:
        return self.id

    @property
    def train(self) -> TrainSnapshot:
        return self._train

    @property
    def train_number(self) -> TrainNumber:
        return self._train.train_number

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def owner_id(self) -> UserId:
        return self._owner_id

    @property
    def seat_count(self) -> int:
        return len(self._passengers)

    @property
    def total_fare(self) -> Money:
        """予約時点の運賃 × 乗客数"""
        return self._train.fare.multiply(self.seat_count)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self._owner_id == user_id
