from dataclasses import dataclass


@dataclass(frozen=True)
class TrainName:
    """列車名"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"Train name must be a string: {self.value!r}")
        if len(self.value.strip()) == 0:
            raise ValueError("Train name cannot be empty")
        if len(self.value) > 100:
            raise ValueError("Train name is too long (max 100 characters)")

    def __str__(self) -> str:
        return self.value
