"""Positions along great circles and multi-arc paths.

This module provides:
- midpoint: Closed-form half-way point between two points, of an arc or a path
- intermediate_point: Spherical linear interpolation at any fraction
- destination_point: Forward navigation by distance and bearing

Fractions outside [0, 1] extrapolate along the same great circle for the
two-point forms. For paths, fractions are measured against the total angular
length of the path.
"""

import math

from greatcircle.config import TOLERANCE_DEG
from greatcircle.core.trig import (
    angular_distance,
    angular_length,
    asind,
    atan2d,
    cosd,
    normalize_longitude,
    sind,
)
from greatcircle.domain import Arc, Arcs, Line, Point


def midpoint(point1: Point, point2: Point) -> Point:
    """Return the half-way point on the great circle between two points.

    Uses the closed-form formula rather than interpolating at 0.5.

    Source: www.movable-type.co.uk/scripts/latlong.html
    """
    delta = point2 - point1
    bx = cosd(point2.lat) * cosd(delta.lon)
    by = cosd(point2.lat) * sind(delta.lon)
    lat = atan2d(sind(point1.lat) + sind(point2.lat), math.hypot(cosd(point1.lat) + bx, by))
    lon = point1.lon + atan2d(by, cosd(point1.lat) + bx)
    return Point(lat, normalize_longitude(lon))


def arc_midpoint(arc: Arc) -> Point:
    return midpoint(arc.point1, arc.point2)


def path_midpoint(arcs: Arcs) -> Point:
    """Return the point half-way along the total length of a path."""
    return path_intermediate_point(arcs, 0.5)


def intermediate_point(
    point1: Point,
    point2: Point,
    fraction: float,
    tolerance_deg: float = TOLERANCE_DEG,
) -> Point:
    """Return the point at ``fraction`` along the great circle from point1 to point2.

    ``fraction`` = 0.0 is ``point1`` and 1.0 is ``point2``.

    Points closer than ``tolerance_deg`` are treated as coincident and
    ``point1`` is returned for every fraction. Antipodal points are joined by
    every great circle through them, so no point between them is defined; the
    endpoint nearer to ``fraction`` is returned instead (``point1`` up to 0.5).

    Args:
        point1: Start point
        point2: End point
        fraction: Position along the arc
        tolerance_deg: Angular distance below which the points coincide

    Returns:
        Interpolated point with longitude in (-180, 180]

    Source: www.movable-type.co.uk/scripts/latlong.html
    """
    delta = angular_distance(point1, point2)
    if delta <= tolerance_deg:
        return point1.normalized()
    if 180.0 - delta <= tolerance_deg:
        return point1.normalized() if fraction <= 0.5 else point2.normalized()

    a = sind((1.0 - fraction) * delta) / sind(delta)
    b = sind(fraction * delta) / sind(delta)
    x = a * cosd(point1.lat) * cosd(point1.lon) + b * cosd(point2.lat) * cosd(point2.lon)
    y = a * cosd(point1.lat) * sind(point1.lon) + b * cosd(point2.lat) * sind(point2.lon)
    z = a * sind(point1.lat) + b * sind(point2.lat)
    return Point(atan2d(z, math.hypot(x, y)), normalize_longitude(atan2d(y, x)))


def arc_intermediate_point(arc: Arc, fraction: float, tolerance_deg: float = TOLERANCE_DEG) -> Point:
    return intermediate_point(arc.point1, arc.point2, fraction, tolerance_deg)


def path_intermediate_point(arcs: Arcs, fraction: float, tolerance_deg: float = TOLERANCE_DEG) -> Point:
    """Return the point at ``fraction`` of the total angular length of a path.

    Walks the arcs in order and interpolates inside the first arc whose
    cumulative length reaches the target length. Fraction 0 returns the first
    point; a target beyond the end of the path returns the last point.

    Args:
        arcs: Path to walk
        fraction: Fraction of the path's total angular length
        tolerance_deg: Passed on to the two-point interpolation

    Returns:
        Point on the path
    """
    target = angular_length(arcs) * fraction
    if target == 0.0:
        return arcs.points[0]

    travelled = 0.0
    for start, end in zip(arcs.points, arcs.points[1:]):
        section = angular_distance(start, end)
        if travelled + section >= target:
            if section == 0.0:
                return start
            return intermediate_point(start, end, (target - travelled) / section, tolerance_deg)
        travelled += section

    return arcs.points[-1]


def destination_point(start: Point, distance: float, bearing: float) -> Point:
    """Return the point reached from ``start`` along a great circle.

    Args:
        start: Start point
        distance: Angular distance to travel in degrees
        bearing: Initial bearing in degrees, clockwise from north

    Returns:
        Destination point with longitude in (-180, 180]

    Source: www.movable-type.co.uk/scripts/latlong.html
    """
    lat = asind(sind(start.lat) * cosd(distance) + cosd(start.lat) * sind(distance) * cosd(bearing))
    lon = start.lon + atan2d(
        sind(bearing) * sind(distance) * cosd(start.lat),
        cosd(distance) - sind(start.lat) * sind(lat),
    )
    return Point(lat, normalize_longitude(lon))


def line_destination_point(line: Line, distance: float) -> Point:
    return destination_point(line.point, distance, line.bearing)
