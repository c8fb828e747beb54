from .exceptions import InsufficientInventoryException, TrainNotFoundException

__all__ = ["InsufficientInventoryException", "TrainNotFoundException"]
