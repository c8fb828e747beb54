from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Pnr:
    """予約番号（Passenger Name Record）

    例: 482913
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"PNR must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"PNR must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
