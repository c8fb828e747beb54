from .caller import Caller
from .currency import Currency
from .money import Money
from .user_id import UserId

__all__ = ["Caller", "Currency", "Money", "UserId"]
