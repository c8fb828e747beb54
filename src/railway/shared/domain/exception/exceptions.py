class DomainException(Exception):
    """ドメイン層で発生する基底例外

    error_code はハンドラ層でエラーレスポンスに変換する際のコード。
    """

    error_code: str = "DOMAIN_ERROR"

    @property
    def details(self) -> list | None:
        """エラーレスポンスに含める補足情報"""
        return None


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    error_code = "NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（一意キーの衝突時）"""

    error_code = "DUPLICATE_ID"


class InvalidInputException(DomainException):
    """入力値が不正な場合（空の乗客リスト、負の座席数・運賃など）"""

    error_code = "INVALID_INPUT"


class AuthorizationException(DomainException):
    """呼び出し元に操作権限がない場合"""

    error_code = "AUTHORIZATION_FAILURE"
