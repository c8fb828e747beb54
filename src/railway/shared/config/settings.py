import os
from dataclasses import dataclass


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer: {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """予約コアの設定

    環境変数から読み込み、未設定の項目はデフォルト値を使う。
    """

    pnr_lower: int = 100000
    pnr_upper: int = 999999
    pnr_max_random_attempts: int = 32
    currency: str = "INR"

    def __post_init__(self) -> None:
        if self.pnr_lower < 1:
            raise ValueError("pnr_lower must be positive")
        if self.pnr_lower > self.pnr_upper:
            raise ValueError("pnr_lower must not exceed pnr_upper")
        if self.pnr_max_random_attempts < 1:
            raise ValueError("pnr_max_random_attempts must be at least 1")

    @classmethod
    def from_env(cls) -> "Settings":
        """環境変数から設定を生成する"""
        return cls(
            pnr_lower=_int_from_env("RAILWAY_PNR_LOWER", cls.pnr_lower),
            pnr_upper=_int_from_env("RAILWAY_PNR_UPPER", cls.pnr_upper),
            pnr_max_random_attempts=_int_from_env(
                "RAILWAY_PNR_MAX_RANDOM_ATTEMPTS", cls.pnr_max_random_attempts
            ),
            currency=os.getenv("RAILWAY_CURRENCY") or cls.currency,
        )
