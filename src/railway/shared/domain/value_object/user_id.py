from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """利用者ID（認証済みの呼び出し元が渡す）

    同じ値を持つ UserId は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"UserId must be a string: {self.value!r}")
        if not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
