"""Location module for turning user input or device position into a query."""

from .positioning import IpApiPositionProvider, PositionProvider
from .resolver import LocationResolver
from .views import ByCoordinates, ByName, IpLocation, LocationQuery

__all__ = [
    "ByCoordinates",
    "ByName",
    "IpApiPositionProvider",
    "IpLocation",
    "LocationQuery",
    "LocationResolver",
    "PositionProvider",
]
