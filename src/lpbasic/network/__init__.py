"""Network package exports."""

from .domain_types import EdgeAttributes, EdgeId, Line, LineId, Stop
from .geo import EARTH_RADIUS_KM, InvalidCoordinateError, great_circle_distance
from .transit_network import TransitNetwork

__all__ = [
    "EARTH_RADIUS_KM",
    "EdgeAttributes",
    "EdgeId",
    "InvalidCoordinateError",
    "Line",
    "LineId",
    "Stop",
    "TransitNetwork",
    "great_circle_distance",
]
