from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(Generic[ID]):
    """Entity 基底クラス

    - ID で同一性を判定する
    """

    def __init__(self, id: ID) -> None:
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self), self._id))
