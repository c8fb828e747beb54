from pydantic import BaseModel, ValidationError

from railway.shared.domain.exception import DomainException


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def error_response(
    error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外をエラーレスポンスに変換"""
    return error_response(error.error_code, str(error), error.details)


def validation_error_response(error: ValidationError) -> dict:
    """リクエストのバリデーションエラーをエラーレスポンスに変換"""
    details = [
        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in error.errors()
    ]
    return error_response("INVALID_INPUT", "Request validation failed", details)
