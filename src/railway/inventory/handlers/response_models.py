from __future__ import annotations

from pydantic import BaseModel

from railway.inventory.domain.entity import Train


class TrainData(BaseModel):
    """列車データのレスポンスモデル"""

    train_number: int
    train_name: str
    source: str
    destination: str
    fare_amount: str
    fare_currency: str
    total_seats: int
    available_seats: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: TrainData


class TrainListData(BaseModel):
    """列車一覧データのレスポンスモデル"""

    trains: list[TrainData]
    count: int


class ListSuccessResponse(BaseModel):
    """一覧の成功レスポンスモデル"""

    status: str = "success"
    data: TrainListData


def to_train_data(train: Train) -> TrainData:
    """Train エンティティをレスポンスデータに変換する"""
    return TrainData(
        train_number=train.id.value,
        train_name=str(train.name),
        source=train.route.source,
        destination=train.route.destination,
        fare_amount=str(train.fare.amount),
        fare_currency=str(train.fare.currency),
        total_seats=train.total_seats,
        available_seats=train.available_seats,
    )


def to_response(train: Train) -> dict:
    """Train エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_train_data(train)).model_dump()


def to_list_response(trains: list[Train]) -> dict:
    """Train エンティティの一覧をレスポンス辞書に変換する"""
    items = [to_train_data(train) for train in trains]
    return ListSuccessResponse(
        data=TrainListData(trains=items, count=len(items))
    ).model_dump()
