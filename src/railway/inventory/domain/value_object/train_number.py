from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class TrainNumber:
    """列車番号

    例: 12049, 22439
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Train number must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"Train number must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
