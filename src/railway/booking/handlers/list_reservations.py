from pydantic import ValidationError

from railway.booking.applications.reservation_service import ReservationService
from railway.booking.handlers.request_models import ListReservationsRequest
from railway.booking.handlers.response_models import to_list_response
from railway.shared.domain import UserId
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("booking")


def list_my_reservations_handler(event: dict, service: ReservationService) -> dict:
    """自分の予約一覧ハンドラ"""
    try:
        request = ListReservationsRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    logger.info("Listing reservations", extra={"user_id": request.user_id})
    return to_list_response(service.list_mine(UserId(request.user_id)))


def list_all_reservations_handler(event: dict, service: ReservationService) -> dict:
    """全予約一覧ハンドラ（管理者用）"""
    logger.info("Listing all reservations")

    try:
        request = ListReservationsRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        reservations = service.list_all(request.to_caller())
    except DomainException as e:
        logger.warning("Failed to list reservations", extra={"error_code": e.error_code})
        return domain_error_response(e)

    return to_list_response(reservations)
