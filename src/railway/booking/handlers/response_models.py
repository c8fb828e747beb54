from __future__ import annotations

from pydantic import BaseModel

from railway.booking.domain.entity import Reservation


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    name: str
    age: int
    gender: str


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    pnr: int
    owner_id: str
    train_number: int
    train_name: str
    source: str
    destination: str
    fare_amount: str
    fare_currency: str
    seat_count: int
    total_fare_amount: str
    passengers: list[PassengerData]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ReservationListData(BaseModel):
    """予約一覧データのレスポンスモデル"""

    reservations: list[ReservationData]
    count: int


class ListSuccessResponse(BaseModel):
    """一覧の成功レスポンスモデル"""

    status: str = "success"
    data: ReservationListData


def to_reservation_data(reservation: Reservation) -> ReservationData:
    """Reservation エンティティをレスポンスデータに変換する"""
    train = reservation.train
    return ReservationData(
        pnr=reservation.id.value,
        owner_id=str(reservation.owner_id),
        train_number=train.train_number.value,
        train_name=str(train.name),
        source=train.route.source,
        destination=train.route.destination,
        fare_amount=str(train.fare.amount),
        fare_currency=str(train.fare.currency),
        seat_count=reservation.seat_count,
        total_fare_amount=str(reservation.total_fare.amount),
        passengers=[
            PassengerData(name=p.name, age=p.age, gender=p.gender.value)
            for p in reservation.passengers
        ],
    )


def to_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_reservation_data(reservation)).model_dump()


def to_list_response(reservations: list[Reservation]) -> dict:
    """Reservation エンティティの一覧をレスポンス辞書に変換する"""
    items = [to_reservation_data(r) for r in reservations]
    return ListSuccessResponse(
        data=ReservationListData(reservations=items, count=len(items))
    ).model_dump()
