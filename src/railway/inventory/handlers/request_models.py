from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field, field_validator

from railway.inventory.domain.enum import TrainSortKey
from railway.shared.handlers import CallerRequest


def _to_decimal(v: object) -> object:
    if v is None or isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation:
        # pydantic 側の型エラーとして報告させる
        return v


class AddTrainRequest(CallerRequest):
    """列車追加リクエストモデル"""

    train_number: int = Field(..., gt=0, description="列車番号", examples=[12049])
    train_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="列車名",
        examples=["Shatabdi Express"],
    )
    source: str = Field(..., min_length=1, description="始発駅", examples=["New Delhi"])
    destination: str = Field(
        ..., min_length=1, description="終着駅", examples=["Kanpur"]
    )
    fare_amount: Decimal = Field(..., ge=0, description="運賃", examples=[1500])
    total_seats: int = Field(..., ge=0, description="総座席数", examples=[100])

    @field_validator("fare_amount", mode="before")
    @classmethod
    def convert_fare_to_decimal(cls, v):
        """Decimalに変換する"""
        return _to_decimal(v)


class ModifyTrainRequest(CallerRequest):
    """列車変更リクエストモデル（未指定の項目は変更しない）"""

    train_number: int = Field(..., gt=0)
    fare_amount: Decimal | None = Field(default=None, ge=0, description="新しい運賃")
    total_seats: int | None = Field(default=None, ge=0, description="新しい総座席数")

    @field_validator("fare_amount", mode="before")
    @classmethod
    def convert_fare_to_decimal(cls, v):
        return _to_decimal(v)


class GetTrainRequest(BaseModel):
    """列車参照リクエストモデル"""

    train_number: int = Field(..., gt=0)


class ListTrainsRequest(BaseModel):
    """列車一覧リクエストモデル"""

    sort_key: TrainSortKey = Field(
        default=TrainSortKey.NUMBER,
        description="並び順（NUMBER / FARE / NAME）",
    )
