from dataclasses import dataclass

from railway.booking.domain.enum import Gender


@dataclass(frozen=True)
class Passenger:
    """乗客（予約内の並び順以外に同一性を持たない値）"""

    name: str
    age: int
    gender: Gender

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Passenger name must be a string: {self.name!r}")
        if not self.name.strip():
            raise ValueError("Passenger name cannot be empty")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"Passenger age must be an integer: {self.age!r}")
        if self.age < 0:
            raise ValueError("Passenger age cannot be negative")
        # "M" / "F" / "O" の文字列も受け付ける
        object.__setattr__(self, "gender", Gender(self.gender))
