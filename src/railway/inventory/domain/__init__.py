from .value_object import Route as Route
from .value_object import TrainName as TrainName
from .value_object import TrainNumber as TrainNumber
from .enum import TrainSortKey as TrainSortKey
from .exception import InsufficientInventoryException as InsufficientInventoryException
from .exception import TrainNotFoundException as TrainNotFoundException
from .entity import Train as Train
from .factory import TrainDetails as TrainDetails
from .factory import TrainFactory as TrainFactory
from .repository import InventoryStore as InventoryStore
