from pydantic import ValidationError

from railway.inventory.applications.modify_train import ModifyTrainService
from railway.inventory.domain.value_object import TrainNumber
from railway.inventory.handlers.request_models import ModifyTrainRequest
from railway.inventory.handlers.response_models import to_response
from railway.shared.domain.exception import DomainException
from railway.shared.utils import (
    domain_error_response,
    get_logger,
    validation_error_response,
)

logger = get_logger("inventory")


def modify_train_handler(event: dict, service: ModifyTrainService) -> dict:
    """列車変更ハンドラ（管理者用）

    運賃・総座席数のうち指定された項目だけを変更する。
    """
    logger.info("Received modify train request")

    try:
        request = ModifyTrainRequest.model_validate(event)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        train = service.modify(
            request.to_caller(),
            TrainNumber(request.train_number),
            fare_amount=request.fare_amount,
            total_seats=request.total_seats,
        )
    except DomainException as e:
        logger.warning("Failed to modify train", extra={"error_code": e.error_code})
        return domain_error_response(e)

    return to_response(train)
