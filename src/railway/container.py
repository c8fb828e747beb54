import random
from dataclasses import dataclass

from railway.booking.applications.reservation_service import ReservationService
from railway.booking.domain.factory import ReservationFactory
from railway.booking.domain.repository import BookingLedger
from railway.booking.domain.service import PnrAllocator
from railway.booking.infrastructure import InMemoryBookingLedger
from railway.inventory.applications.add_train import AddTrainService
from railway.inventory.applications.list_trains import ListTrainsService
from railway.inventory.applications.modify_train import ModifyTrainService
from railway.inventory.domain.factory import TrainFactory
from railway.inventory.domain.repository import InventoryStore
from railway.inventory.infrastructure import InMemoryInventoryStore
from railway.shared.config import Settings
from railway.shared.domain import Currency


@dataclass(frozen=True)
class Container:
    """組み立て済みのサービス一式

    呼び出し側（CLI など）はこのインスタンスを保持し、
    ハンドラに必要なサービスを渡す。
    """

    settings: Settings
    store: InventoryStore
    ledger: BookingLedger
    reservation_service: ReservationService
    add_train_service: AddTrainService
    modify_train_service: ModifyTrainService
    list_trains_service: ListTrainsService


def build_container(
    settings: Settings | None = None,
    store: InventoryStore | None = None,
    ledger: BookingLedger | None = None,
    rng: random.Random | None = None,
) -> Container:
    """依存関係を組み立てる（Composition Root）

    ストアと台帳は差し替え可能。未指定ならプロセス内メモリ実装を使う。
    """
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = InMemoryInventoryStore()
    if ledger is None:
        ledger = InMemoryBookingLedger()

    train_factory = TrainFactory(currency=Currency(settings.currency))
    allocator = PnrAllocator.from_settings(ledger, settings, rng=rng)

    return Container(
        settings=settings,
        store=store,
        ledger=ledger,
        reservation_service=ReservationService(
            store=store,
            ledger=ledger,
            allocator=allocator,
            factory=ReservationFactory(),
        ),
        add_train_service=AddTrainService(store=store, factory=train_factory),
        modify_train_service=ModifyTrainService(store=store, factory=train_factory),
        list_trains_service=ListTrainsService(store=store),
    )
