import random
from decimal import Decimal

import pytest

from railway.booking.domain.enum import Gender
from railway.booking.domain.value_object import Passenger
from railway.booking.infrastructure import InMemoryBookingLedger
from railway.container import build_container
from railway.inventory.domain.entity import Train
from railway.inventory.domain.value_object import Route, TrainName, TrainNumber
from railway.inventory.infrastructure import InMemoryInventoryStore
from railway.shared.config import Settings
from railway.shared.domain import Caller, Money, Role, UserId


@pytest.fixture
def user_id():
    """全テスト共通の UserId フィクスチャ"""
    return UserId(value="user")


@pytest.fixture
def other_user_id():
    return UserId(value="someone-else")


@pytest.fixture
def admin():
    """管理者の Caller"""
    return Caller(user_id=UserId(value="admin"), role=Role.ADMIN)


@pytest.fixture
def traveler(user_id):
    """一般利用者の Caller"""
    return Caller(user_id=user_id, role=Role.TRAVELER)


@pytest.fixture
def create_train():
    """Train を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        train_number: int = 12049,
        name: str = "Shatabdi Express",
        source: str = "New Delhi",
        destination: str = "Kanpur",
        fare: Decimal = Decimal("1500.00"),
        total_seats: int = 100,
        available_seats: int | None = None,
    ) -> Train:
        return Train(
            id=TrainNumber(value=train_number),
            name=TrainName(value=name),
            route=Route(source=source, destination=destination),
            fare=Money.inr(fare),
            total_seats=total_seats,
            available_seats=available_seats,
        )

    return _factory


@pytest.fixture
def create_passengers():
    """指定人数の乗客リストを生成する Factory fixture"""

    def _factory(count: int = 1) -> list[Passenger]:
        return [
            Passenger(name=f"Passenger {i + 1}", age=30 + i, gender=Gender.OTHER)
            for i in range(count)
        ]

    return _factory


@pytest.fixture
def store():
    return InMemoryInventoryStore()


@pytest.fixture
def ledger():
    return InMemoryBookingLedger()


@pytest.fixture
def container(store, ledger):
    """テストごとに独立したサービス一式"""
    return build_container(
        settings=Settings(),
        store=store,
        ledger=ledger,
        rng=random.Random(42),
    )
