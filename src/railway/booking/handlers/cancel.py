from pydantic import ValidationError

from railway.booking.applications.reservation_service import ReservationService
from railway.booking.domain.value_object import Pnr
from railway.booking.handlers.request_models import CancelTicketRequest
from railway.booking.handlers.response_models import to_response
from railway.shared.domain import UserId
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("booking")


def cancel_ticket_handler(event: dict, service: ReservationService) -> dict:
    """乗車券取消ハンドラ（取り消した予約を返す）"""
    logger.info("Received cancel ticket request")

    try:
        request = CancelTicketRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        reservation = service.cancel(Pnr(request.pnr), UserId(request.user_id))
    except DomainException as e:
        logger.warning("Failed to cancel ticket", extra={"error_code": e.error_code})
        return domain_error_response(e)

    return to_response(reservation)
