"""Angular distance from a point to lines, arcs, paths and polygon borders.

This module provides:
- cross_track_distance: Signed distance from a point to a great circle
- along_track_distance: Position of a point's foot along a great circle
- line_distance / segment_distance / arc_distance: Distance to a line or bounded arc
- path_distance / polygon_border_distance: Distance to the nearest segment

All distances are in degrees of arc on the unit sphere.

Source: www.movable-type.co.uk/scripts/latlong.html
"""

from greatcircle.core.trig import angular_distance, asind, atan2d, bearing, cosd, sind
from greatcircle.domain import Arc, Arcs, Line, Point, Polygon


def _cross_track(point: Point, origin: Point, course: float) -> float:
    return asind(sind(angular_distance(origin, point)) * sind(bearing(origin, point) - course))


def cross_track_distance(point: Point, start: Point, end: Point) -> float:
    """Return the signed distance from ``point`` to the great circle start -> end.

    Negative values lie left of the direction of travel, positive values right.
    """
    return _cross_track(point, start, bearing(start, end))


def along_track_distance(point: Point, start: Point, end: Point) -> float:
    """Return how far along the great circle start -> end the foot of ``point`` lies.

    The foot is the closest point of the great circle to ``point``. The result is
    measured from ``start`` in the direction of ``end`` and lies in (-180, 180];
    negative values are behind ``start``.
    """
    dist13 = angular_distance(start, point)
    angle = bearing(start, point) - bearing(start, end)
    return atan2d(sind(dist13) * cosd(angle), cosd(dist13))


def line_distance(point: Point, line: Line) -> float:
    """Return the distance from ``point`` to the great circle of ``line``."""
    return abs(_cross_track(point, line.point, line.bearing))


def segment_distance(point: Point, start: Point, end: Point) -> float:
    """Return the distance from ``point`` to the arc start -> end.

    When the foot of the point falls between the ends of the arc, this is the
    cross-track distance; otherwise it is the distance to the nearer end.

    Args:
        point: Point to measure from
        start: Start of the arc
        end: End of the arc

    Returns:
        Angular distance in degrees
    """
    length = angular_distance(start, end)
    if length == 0.0:
        return angular_distance(point, start)

    along = along_track_distance(point, start, end)
    if 0.0 <= along <= length:
        return abs(cross_track_distance(point, start, end))
    return min(angular_distance(point, start), angular_distance(point, end))


def arc_distance(point: Point, arc: Arc) -> float:
    return segment_distance(point, arc.point1, arc.point2)


def path_distance(point: Point, arcs: Arcs) -> float:
    """Return the distance from ``point`` to the nearest segment of a path."""
    return min(arc_distance(point, arc) for arc in arcs.segments())


def polygon_border_distance(point: Point, polygon: Polygon) -> float:
    """Return the distance from ``point`` to the border of a polygon."""
    return path_distance(point, polygon.boundary())
