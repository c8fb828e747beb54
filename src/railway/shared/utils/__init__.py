from .logger import get_logger
from .response import (
    ErrorResponse,
    domain_error_response,
    error_response,
    validation_error_response,
)

__all__ = [
    "get_logger",
    "ErrorResponse",
    "error_response",
    "domain_error_response",
    "validation_error_response",
]
