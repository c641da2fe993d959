"""Primitive spherical trigonometry in degrees.

This module provides:
- Degree-based trigonometric helpers (sind, cosd, asind, acosd, atan2d)
- Angle normalization for longitudes, signed angles and bearings
- Initial and final bearings between two points
- Angular (great-circle) distance and path length

All functions are pure and operate on a unit sphere, so an angular distance in
degrees is also the arc length.
"""

import math

from greatcircle.domain import Arc, Arcs, Point, wrap_longitude


def sind(angle: float) -> float:
    return math.sin(math.radians(angle))


def cosd(angle: float) -> float:
    return math.cos(math.radians(angle))


def asind(value: float) -> float:
    """Inverse sine in degrees, clamping rounding noise outside [-1, 1]."""
    return math.degrees(math.asin(max(-1.0, min(1.0, value))))


def acosd(value: float) -> float:
    """Inverse cosine in degrees, clamping rounding noise outside [-1, 1]."""
    return math.degrees(math.acos(max(-1.0, min(1.0, value))))


def atan2d(y: float, x: float) -> float:
    return math.degrees(math.atan2(y, x))


def normalize_longitude(lon: float) -> float:
    """Normalize a longitude into (-180, 180]."""
    return wrap_longitude(lon)


def normalize_angle(angle: float) -> float:
    """Normalize a signed angle difference into (-180, 180]."""
    return wrap_longitude(angle)


def normalize_bearing(angle: float) -> float:
    """Normalize a bearing into [0, 360)."""
    result = angle % 360.0
    # -1e-17 % 360.0 rounds up to 360.0
    return 0.0 if result == 360.0 else result


def bearing(point1: Point, point2: Point) -> float:
    """Return the initial bearing from ``point1`` to ``point2``.

    The bearing is measured in degrees clockwise from north along the great
    circle through both points, normalized to [0, 360).

    Source: www.movable-type.co.uk/scripts/latlong.html
    """
    delta = point2 - point1
    y = sind(delta.lon) * cosd(point2.lat)
    x = cosd(point1.lat) * sind(point2.lat) - sind(point1.lat) * cosd(point2.lat) * cosd(delta.lon)
    return normalize_bearing(atan2d(y, x))


def final_bearing(point1: Point, point2: Point) -> float:
    """Return the bearing on arrival at ``point2`` when coming from ``point1``."""
    return normalize_bearing(bearing(point2, point1) + 180.0)


def arc_bearing(arc: Arc) -> float:
    return bearing(arc.point1, arc.point2)


def arc_final_bearing(arc: Arc) -> float:
    return final_bearing(arc.point1, arc.point2)


def angular_distance(point1: Point, point2: Point) -> float:
    """Return the central angle between two points in degrees (haversine).

    Examples:
        >>> round(angular_distance(Point(0.0, 0.0), Point(0.0, 90.0)), 9)
        90.0
    """
    delta = point2 - point1
    h = sind(delta.lat / 2.0) ** 2 + cosd(point1.lat) * cosd(point2.lat) * sind(delta.lon / 2.0) ** 2
    return 2.0 * asind(math.sqrt(h))


def arc_length(arc: Arc) -> float:
    return angular_distance(arc.point1, arc.point2)


def angular_length(arcs: Arcs) -> float:
    """Return the total angular length of a path (sum of its arcs) in degrees."""
    return sum(angular_distance(start, end) for start, end in zip(arcs.points, arcs.points[1:]))
