from dataclasses import dataclass

from railway.shared.domain.enum import Role
from railway.shared.domain.exception import AuthorizationException

from .user_id import UserId


@dataclass(frozen=True)
class Caller:
    """呼び出し元（認証済みの UserId + ロール）"""

    user_id: UserId
    role: Role = Role.TRAVELER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def require_admin(self) -> None:
        """管理者でなければ AuthorizationException"""
        if not self.is_admin:
            raise AuthorizationException(
                f"User {self.user_id} is not allowed to perform admin operations"
            )
