from .location_repository import CAMPUS_LOCATIONS, LocationRepository
from .order_repository import OrderRepository

__all__ = [
    "CAMPUS_LOCATIONS",
    "LocationRepository",
    "OrderRepository",
]
