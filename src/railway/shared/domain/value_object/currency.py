from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """運賃の通貨コード（ISO 4217 の3文字）

    小文字で渡されても大文字に正規化する（"inr" -> "INR"）。
    """

    code: str

    def __post_init__(self) -> None:
        code = self.code.strip().upper() if isinstance(self.code, str) else ""
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Invalid currency code: {self.code!r}")
        object.__setattr__(self, "code", code)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def inr(cls) -> "Currency":
        """インドルピー（既定の通貨）"""
        return cls("INR")
