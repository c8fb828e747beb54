from .enum import Gender as Gender
from .value_object import Passenger as Passenger
from .value_object import Pnr as Pnr
from .value_object import TrainSnapshot as TrainSnapshot
from .exception import PnrSpaceExhaustedException as PnrSpaceExhaustedException
from .exception import ReservationNotFoundException as ReservationNotFoundException
from .entity import Reservation as Reservation
from .factory import PassengerDetails as PassengerDetails
from .factory import ReservationFactory as ReservationFactory
from .repository import BookingLedger as BookingLedger
from .service import PnrAllocator as PnrAllocator
