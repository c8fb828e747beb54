from .exceptions import PnrSpaceExhaustedException, ReservationNotFoundException

__all__ = ["PnrSpaceExhaustedException", "ReservationNotFoundException"]
