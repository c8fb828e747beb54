from .route import Route
from .train_name import TrainName
from .train_number import TrainNumber

__all__ = ["Route", "TrainName", "TrainNumber"]
