from pydantic import BaseModel, Field

from railway.booking.domain.enum import Gender
from railway.shared.handlers import CallerRequest


class PassengerRequest(BaseModel):
    """乗客の入力スキーマ"""

    name: str = Field(..., min_length=1, description="乗客名", examples=["Asha"])
    age: int = Field(..., ge=0, description="年齢", examples=[34])
    gender: Gender = Field(..., description="性別コード（M / F / O）", examples=["F"])


class BookTicketRequest(CallerRequest):
    """乗車券予約リクエストスキーマ"""

    train_number: int = Field(..., gt=0, description="列車番号", examples=[12049])
    passengers: list[PassengerRequest] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "user",
                    "train_number": 12049,
                    "passengers": [
                        {"name": "Asha", "age": 34, "gender": "F"},
                        {"name": "Ravi", "age": 36, "gender": "M"},
                    ],
                }
            ]
        }
    }


class CancelTicketRequest(CallerRequest):
    """乗車券取消リクエストモデル"""

    pnr: int = Field(..., gt=0, description="予約番号")


class ListReservationsRequest(CallerRequest):
    """予約一覧リクエストモデル"""
