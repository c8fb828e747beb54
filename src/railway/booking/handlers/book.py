from pydantic import ValidationError

from railway.booking.applications.reservation_service import ReservationService
from railway.booking.domain.factory import PassengerDetails, ReservationFactory
from railway.booking.handlers.request_models import BookTicketRequest
from railway.booking.handlers.response_models import to_response
from railway.inventory.domain.value_object import TrainNumber
from railway.shared.domain import UserId
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("booking")

factory = ReservationFactory()


def book_ticket_handler(event: dict, service: ReservationService) -> dict:
    """乗車券予約ハンドラ

    リクエストを pydantic でバリデーションし、予約結果をレスポンス辞書で返す。
    ドメイン例外は error_code 付きのエラーレスポンスに変換する。
    """
    logger.info("Received book ticket request")

    try:
        request = BookTicketRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        passengers = factory.passengers(_to_passenger_details(request))
        reservation = service.book(
            TrainNumber(request.train_number),
            UserId(request.user_id),
            passengers,
        )
    except DomainException as e:
        logger.warning("Failed to book ticket", extra={"error_code": e.error_code})
        return domain_error_response(e)

    return to_response(reservation)


def _to_passenger_details(request: BookTicketRequest) -> list[PassengerDetails]:
    """リクエストボディから PassengerDetails を構築する"""

    return [
        {"name": p.name, "age": p.age, "gender": p.gender.value}
        for p in request.passengers
    ]
