import random
from threading import Lock

from railway.booking.domain.exception import PnrSpaceExhaustedException
from railway.booking.domain.repository import BookingLedger
from railway.booking.domain.value_object import Pnr
from railway.shared.config import Settings
from railway.shared.utils import get_logger

logger = get_logger("booking")


class PnrAllocator:
    """予約番号の採番

    指定範囲から乱数で引き、台帳で使用中の番号は引き直す。
    max_random_attempts 回続けて衝突した場合は、前回位置から範囲を一巡する
    連番に切り替える。範囲がすべて使用中なら PnrSpaceExhaustedException。

    採番から台帳登録までの一意性は、呼び出し側が台帳ロックを
    両方の操作にまたがって保持することで保証する。
    """

    def __init__(
        self,
        ledger: BookingLedger,
        lower: int = 100000,
        upper: int = 999999,
        max_random_attempts: int = 32,
        rng: random.Random | None = None,
    ) -> None:
        if lower < 1 or lower > upper:
            raise ValueError(f"Invalid PNR range: {lower}-{upper}")
        if max_random_attempts < 1:
            raise ValueError("max_random_attempts must be at least 1")

        self._ledger = ledger
        self._lower = lower
        self._upper = upper
        self._max_random_attempts = max_random_attempts
        self._rng = rng or random.Random()
        self._next_sequential = lower
        self._lock = Lock()

    @classmethod
    def from_settings(
        cls,
        ledger: BookingLedger,
        settings: Settings,
        rng: random.Random | None = None,
    ) -> "PnrAllocator":
        return cls(
            ledger=ledger,
            lower=settings.pnr_lower,
            upper=settings.pnr_upper,
            max_random_attempts=settings.pnr_max_random_attempts,
            rng=rng,
        )

    def allocate(self) -> Pnr:
        """未使用の予約番号を1つ返す"""
        with self._ledger.locked(), self._lock:
            for _ in range(self._max_random_attempts):
                candidate = Pnr(self._rng.randint(self._lower, self._upper))
                if not self._ledger.exists(candidate):
                    return candidate

            logger.warning(
                "Random PNR draws kept colliding; falling back to sequential allocation",
                extra={"attempts": self._max_random_attempts},
            )
            return self._allocate_sequential()

    def _allocate_sequential(self) -> Pnr:
        for _ in range(self._upper - self._lower + 1):
            candidate = Pnr(self._next_sequential)
            self._advance()
            if not self._ledger.exists(candidate):
                return candidate

        raise PnrSpaceExhaustedException(
            f"All PNRs in {self._lower}-{self._upper} are in use"
        )

    def _advance(self) -> None:
        if self._next_sequential >= self._upper:
            self._next_sequential = self._lower
        else:
            self._next_sequential += 1
