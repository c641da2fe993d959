"""Point and line value types on the unit sphere.

This module defines:
- Point: A (latitude, longitude) pair in degrees
- Line: A great circle given by a point and an initial bearing
"""

import math
from dataclasses import dataclass
from typing import Any

from greatcircle.exceptions import InvalidPointError


def wrap_longitude(lon: float) -> float:
    """Wrap an angle in degrees into the half-open interval (-180, 180].

    Args:
        lon: Angle in degrees

    Returns:
        Equivalent angle in (-180, 180]

    Examples:
        >>> wrap_longitude(190.0)
        -170.0
        >>> wrap_longitude(-180.0)
        180.0
    """
    wrapped = math.fmod(lon + 180.0, 360.0)
    if wrapped <= 0.0:
        wrapped += 360.0
    return wrapped - 180.0


@dataclass(frozen=True, slots=True)
class Point:
    """A position on the unit sphere.

    Immutable and hashable. Coordinates are not validated on construction
    because the same type carries coordinate deltas (see ``__sub__``); call
    ``validate()`` where a real position is required.

    Attributes:
        lat: Latitude in degrees, [-90, 90] for a valid position
        lon: Longitude in degrees, normalized into (-180, 180] by producers
    """

    lat: float
    lon: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.lat - other.lat, self.lon - other.lon)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.lat * factor, self.lon * factor)

    __rmul__ = __mul__

    def normalized(self) -> "Point":
        """Return the same position with longitude wrapped into (-180, 180]."""
        return Point(self.lat, wrap_longitude(self.lon))

    def is_valid(self) -> bool:
        """Check that both coordinates are finite and latitude is in range."""
        return (
            math.isfinite(self.lat)
            and math.isfinite(self.lon)
            and -90.0 <= self.lat <= 90.0
        )

    def validate(self) -> "Point":
        """Return self, or raise if the point is not a valid position.

        Raises:
            InvalidPointError: If a coordinate is not finite or latitude is out of range
        """
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise InvalidPointError(self.lat, self.lon, "coordinates must be finite")
        if not -90.0 <= self.lat <= 90.0:
            raise InvalidPointError(self.lat, self.lon, "latitude must be within [-90, 90]")
        return self

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (lat, lon) tuple."""
        return (self.lat, self.lon)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with lat and lon fields
        """
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with lat and lon fields

        Returns:
            Point instance
        """
        return cls(lat=data["lat"], lon=data["lon"])


@dataclass(frozen=True, slots=True)
class Line:
    """An unbounded great circle through ``point`` heading along ``bearing``.

    Attributes:
        point: Start point of the line
        bearing: Initial bearing in degrees, clockwise from north
    """

    point: Point
    bearing: float
