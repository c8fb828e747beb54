from enum import Enum


class TrainSortKey(str, Enum):
    """列車一覧の並び順"""

    NUMBER = "NUMBER"
    FARE = "FARE"
    NAME = "NAME"
