from railway.inventory.domain.exception import InsufficientInventoryException
from railway.inventory.domain.value_object import Route, TrainName, TrainNumber
from railway.shared.domain import AggregateRoot, Money
from railway.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidInputException,
)


class Train(AggregateRoot[TrainNumber]):
    """列車（座席在庫を持つ集約）

    空席数は reserve_seats / release_seats / resize を通してのみ変化し、
    常に 0 <= available_seats <= total_seats を満たす。
    排他制御は InventoryStore が列車ごとのロックで行う。
    """

    def __init__(
        self,
        id: TrainNumber,
        name: TrainName,
        route: Route,
        fare: Money,
        total_seats: int,
        available_seats: int | None = None,
    ) -> None:
        super().__init__(id)

        self._name = name
        self._route = route
        self._fare = fare
        self._total_seats = total_seats
        self._available_seats = (
            total_seats if available_seats is None else available_seats
        )

        self._validate_seats()

    def _validate_seats(self) -> None:
        """0 <= 空席数 <= 総座席数"""
        if self._total_seats < 0:
            raise InvalidInputException("Total seats cannot be negative")
        if not 0 <= self._available_seats <= self._total_seats:
            raise BusinessRuleViolationException(
                "Available seats must be between 0 and total seats"
            )

    @property
    def name(self) -> TrainName:
        return self._name

    @property
    def route(self) -> Route:
        return self._route

    @property
    def fare(self) -> Money:
        return self._fare

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def available_seats(self) -> int:
        return self._available_seats

    def reserve_seats(self, count: int) -> None:
        """座席を確保する（空席不足なら状態を変えずに例外）"""
        if count < 1:
            raise InvalidInputException("Seat count must be at least 1")
        if self._available_seats < count:
            raise InsufficientInventoryException(
                self.id, requested=count, available=self._available_seats
            )
        self._available_seats -= count

    def release_seats(self, count: int) -> None:
        """座席を返却する

        二重返却で総座席数を超えないよう上限で切り詰める。
        切り詰めはフェイルセーフであり、エラーとしては報告しない。
        """
        if count < 0:
            raise InvalidInputException("Seat count cannot be negative")
        self._available_seats = min(self._available_seats + count, self._total_seats)

    def resize(self, new_total: int) -> None:
        """総座席数を変更し、空席数を新しい総座席数にリセットする

        既存予約の座席数は引き継がない。
        """
        if new_total < 0:
            raise InvalidInputException("Total seats cannot be negative")
        self._total_seats = new_total
        self._available_seats = new_total

    def change_fare(self, fare: Money) -> None:
        """運賃を変更する（発券済みの予約には影響しない）"""
        self._fare = fare

    def clone(self) -> "Train":
        """現在の状態のコピーを返す"""
        return Train(
            id=self.id,
            name=self._name,
            route=self._route,
            fare=self._fare,
            total_seats=self._total_seats,
            available_seats=self._available_seats,
        )
