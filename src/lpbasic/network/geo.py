"""Great-circle distance between WGS84 points."""

from __future__ import annotations

import math
import numbers

EARTH_RADIUS_KM = 6371.0


class InvalidCoordinateError(ValueError):
    """Raised when a latitude or longitude falls outside its valid range."""


def _check_coordinate(value: float, limit: float, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidCoordinateError(f"{label} must be a real number, got {value!r}.")
    number = float(value)
    if not math.isfinite(number) or number < -limit or number > limit:
        raise InvalidCoordinateError(
            f"{label} must lie within [-{limit:g}, {limit:g}], got {value!r}."
        )
    return number


def great_circle_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Distance along the surface of a spherical Earth, in ``radius_km`` units.

    Uses the haversine formula. The intermediate term is clamped to [0, 1] so
    rounding near antipodal points cannot push ``sqrt(1 - a)`` out of domain.
    """
    lat1 = _check_coordinate(lat1, 90.0, "latitude1")
    lon1 = _check_coordinate(lon1, 180.0, "longitude1")
    lat2 = _check_coordinate(lat2, 90.0, "latitude2")
    lon2 = _check_coordinate(lon2, 180.0, "longitude2")

    rad_lat1, rad_lon1 = math.radians(lat1), math.radians(lon1)
    rad_lat2, rad_lon2 = math.radians(lat2), math.radians(lon2)
    dlat = rad_lat2 - rad_lat1
    dlon = rad_lon2 - rad_lon1
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(dlon / 2) ** 2
    )
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius_km * c
