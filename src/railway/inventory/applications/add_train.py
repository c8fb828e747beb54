from railway.inventory.domain.entity import Train
from railway.inventory.domain.factory import TrainDetails, TrainFactory
from railway.inventory.domain.repository import InventoryStore
from railway.shared.domain import Caller
from railway.shared.utils import get_logger

logger = get_logger("inventory")


class AddTrainService:
    """列車追加ユースケース（管理者のみ）"""

    def __init__(self, store: InventoryStore, factory: TrainFactory) -> None:
        self._store = store
        self._factory = factory

    def add(self, caller: Caller, details: TrainDetails) -> Train:
        """列車を追加する"""
        caller.require_admin()

        train = self._factory.create(details)
        self._store.save(train)

        logger.info(
            "Train added",
            extra={
                "train_number": train.id.value,
                "total_seats": train.total_seats,
                "added_by": str(caller.user_id),
            },
        )
        return train
