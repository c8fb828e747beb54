from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値へのアクセスは必ず集約ルートを経由
    - ロック境界 = 集約境界（列車は列車ごと、予約は台帳単位）
    - ストアの外へ渡すのはコピーか不変の集約のみ
    """
