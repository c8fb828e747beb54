from railway.booking.domain.value_object import Pnr
from railway.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class ReservationNotFoundException(ResourceNotFoundException):
    """予約が見つからない場合（取消済みを含む）"""

    error_code = "RESERVATION_NOT_FOUND"

    def __init__(self, pnr: Pnr) -> None:
        super().__init__(f"Reservation not found: {pnr}")
        self.pnr = pnr


class PnrSpaceExhaustedException(BusinessRuleViolationException):
    """予約番号の空間がすべて使用中の場合"""

    error_code = "PNR_SPACE_EXHAUSTED"
