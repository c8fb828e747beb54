from __future__ import annotations

from dataclasses import dataclass

from railway.inventory.domain.entity import Train
from railway.inventory.domain.value_object import Route, TrainName, TrainNumber
from railway.shared.domain import Money


@dataclass(frozen=True)
class TrainSnapshot:
    """予約時点の列車情報のコピー

    発券後に運賃や列車名が変わっても予約の内容は変わらない。
    """

    train_number: TrainNumber
    name: TrainName
    route: Route
    fare: Money

    @classmethod
    def from_train(cls, train: Train) -> TrainSnapshot:
        return cls(
            train_number=train.id,
            name=train.name,
            route=train.route,
            fare=train.fare,
        )
