from .train_factory import TrainDetails as TrainDetails
from .train_factory import TrainFactory as TrainFactory
