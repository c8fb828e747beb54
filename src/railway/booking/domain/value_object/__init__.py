from .passenger import Passenger
from .pnr import Pnr
from .train_snapshot import TrainSnapshot

__all__ = ["Passenger", "Pnr", "TrainSnapshot"]
