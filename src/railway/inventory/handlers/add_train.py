from pydantic import ValidationError

from railway.inventory.applications.add_train import AddTrainService
from railway.inventory.domain.factory import TrainDetails
from railway.inventory.handlers.request_models import AddTrainRequest
from railway.inventory.handlers.response_models import to_response
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("inventory")


def add_train_handler(event: dict, service: AddTrainService) -> dict:
    """列車追加ハンドラ（管理者用）"""
    logger.info("Received add train request")

    try:
        request = AddTrainRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        train = service.add(request.to_caller(), _to_train_details(request))
    except DomainException as e:
        logger.warning("Failed to add train", extra={"error_code": e.error_code})
        return domain_error_response(e)

    return to_response(train)


def _to_train_details(request: AddTrainRequest) -> TrainDetails:
    """リクエストから TrainDetails を構築する"""

    return {
        "train_number": request.train_number,
        "train_name": request.train_name,
        "source": request.source,
        "destination": request.destination,
        "fare_amount": request.fare_amount,
        "total_seats": request.total_seats,
    }
