from pydantic import BaseModel, Field

from railway.shared.domain import Caller, Role, UserId


class CallerRequest(BaseModel):
    """認証済み呼び出し元のリクエスト項目"""

    model_config = {"str_strip_whitespace": True}

    user_id: str = Field(
        ...,
        min_length=1,
        description="認証済みの利用者ID",
        examples=["user"],
    )
    role: Role = Field(default=Role.TRAVELER, description="利用者ロール")

    def to_caller(self) -> Caller:
        return Caller(user_id=UserId(self.user_id), role=self.role)
