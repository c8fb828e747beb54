from enum import Enum


class Gender(str, Enum):
    """乗客の性別コード"""

    MALE = "M"
    FEMALE = "F"
    OTHER = "O"
