from pydantic import ValidationError

from railway.inventory.applications.list_trains import ListTrainsService
from railway.inventory.domain.value_object import TrainNumber
from railway.inventory.handlers.request_models import (
    GetTrainRequest,
    ListTrainsRequest,
)
from railway.inventory.handlers.response_models import to_list_response, to_response
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("inventory")


def list_trains_handler(event: dict, service: ListTrainsService) -> dict:
    """列車一覧ハンドラ"""
    logger.info("Listing trains")

    try:
        request = ListTrainsRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    return to_list_response(service.list(request.sort_key))


def get_train_handler(event: dict, service: ListTrainsService) -> dict:
    """列車詳細ハンドラ"""
    try:
        request = GetTrainRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    logger.info("Fetching train", extra={"train_number": request.train_number})

    try:
        train = service.get(TrainNumber(request.train_number))
    except DomainException as e:
        return domain_error_response(e)

    return to_response(train)
