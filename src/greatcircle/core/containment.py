"""On-border and inside tests for points, arcs and paths.

A point is on a line, arc, path or polygon border when its angular distance
to it is within ``tolerance_deg``.

A spherical polygon divides the sphere into two regions. The interior is taken
to be the region that does not contain the antipode of the mean of the
polygon's vertices, which for any polygon smaller than a hemisphere is the
smaller region. Points on the border count as inside.
"""

import logging
import math

from greatcircle.config import DEGENERACY_EPSILON, TOLERANCE_DEG
from greatcircle.core.distance import (
    arc_distance,
    cross_track_distance,
    line_distance,
    path_distance,
    polygon_border_distance,
    segment_distance,
)
from greatcircle.core.interpolation import destination_point, midpoint
from greatcircle.core.intersection import segment_intersection
from greatcircle.core.search import section_intersection_points
from greatcircle.core.trig import angular_distance, atan2d, bearing, cosd, normalize_longitude, sind
from greatcircle.domain import Arc, Arcs, Line, Point, Polygon
from greatcircle.exceptions import AmbiguousGeometryError

logger = logging.getLogger(__name__)

# Longest leg of the test ray; longer legs make bearings ill-conditioned near 180 degrees
MAX_RAY_LEG_DEG = 45.0


def is_on_line(point: Point, line: Line, tolerance_deg: float = TOLERANCE_DEG) -> bool:
    return line_distance(point, line) <= tolerance_deg


def is_on_segment(
    point: Point, start: Point, end: Point, tolerance_deg: float = TOLERANCE_DEG
) -> bool:
    return segment_distance(point, start, end) <= tolerance_deg


def is_on_arc(point: Point, arc: Arc, tolerance_deg: float = TOLERANCE_DEG) -> bool:
    return arc_distance(point, arc) <= tolerance_deg


def is_on_path(point: Point, arcs: Arcs, tolerance_deg: float = TOLERANCE_DEG) -> bool:
    return path_distance(point, arcs) <= tolerance_deg


def is_on_polygon_border(
    point: Point, polygon: Polygon, tolerance_deg: float = TOLERANCE_DEG
) -> bool:
    return polygon_border_distance(point, polygon) <= tolerance_deg


def outside_reference(
    polygon: Polygon, degeneracy_epsilon: float = DEGENERACY_EPSILON
) -> Point:
    """Return a point outside the polygon: the antipode of its mean vertex.

    Raises:
        AmbiguousGeometryError: If the vertices balance around the sphere's
            centre, so that no side of the border can be told apart
    """
    vertices = polygon.boundary().points[:-1]
    x = sum(cosd(v.lat) * cosd(v.lon) for v in vertices)
    y = sum(cosd(v.lat) * sind(v.lon) for v in vertices)
    z = sum(sind(v.lat) for v in vertices)
    if math.sqrt(x * x + y * y + z * z) / len(vertices) <= degeneracy_epsilon:
        raise AmbiguousGeometryError(
            "polygon interior",
            "the vertices are balanced around the centre of the sphere",
        )
    return Point(-atan2d(z, math.hypot(x, y)), normalize_longitude(atan2d(y, x) + 180.0))


def _ray_legs(point: Point, target: Point, tolerance_deg: float) -> list[tuple[Point, Point]]:
    """Split the great-circle ray from ``point`` to ``target`` into short legs."""
    length = angular_distance(point, target)
    if length <= tolerance_deg:
        return []

    # Every great circle through a point also passes through its antipode
    course = bearing(point, target) if 180.0 - length > tolerance_deg else 0.0
    count = max(1, math.ceil(length / MAX_RAY_LEG_DEG))
    stops = [point] + [destination_point(point, length * k / count, course) for k in range(1, count + 1)]
    return list(zip(stops, stops[1:]))


def boundary_crossings(
    point: Point,
    polygon: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> int:
    """Count the border edges crossed by the ray from ``point`` to the outside reference.

    An edge counts only when its two vertices lie on opposite sides of the
    ray's great circle, with a vertex exactly on the circle taken as left. A
    ray through a vertex therefore counts once when it passes through the
    border and zero or two times when it only touches it.
    """
    reference = outside_reference(polygon, degeneracy_epsilon)
    legs = _ray_legs(point, reference, tolerance_deg)
    if not legs:
        return 0

    ray_start, ray_end = legs[0]
    crossings = 0
    for edge in polygon.boundary().segments():
        right1 = cross_track_distance(edge.point1, ray_start, ray_end) > 0.0
        right2 = cross_track_distance(edge.point2, ray_start, ray_end) > 0.0
        if right1 == right2:
            continue
        for leg_start, leg_end in legs:
            hit = segment_intersection(
                leg_start, leg_end, edge.point1, edge.point2, tolerance_deg, degeneracy_epsilon
            )
            if hit.is_point:
                crossings += 1
                break

    logger.debug("Ray from %s crosses the border %d times", point, crossings)
    return crossings


def is_point_in_polygon(
    point: Point,
    polygon: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> bool:
    """Return True if ``point`` is inside ``polygon`` or on its border.

    Counts the border crossings of a great-circle ray from the point to a
    reference point outside the polygon; an odd count means inside.

    Args:
        point: Point to test
        polygon: Polygon to test against
        tolerance_deg: Distance from the border that still counts as on it
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        True if the point is inside or on the border

    Raises:
        AmbiguousGeometryError: If the polygon's interior cannot be determined
    """
    if is_on_polygon_border(point, polygon, tolerance_deg):
        return True
    return boundary_crossings(point, polygon, tolerance_deg, degeneracy_epsilon) % 2 == 1


def is_path_in_polygon(
    arcs: Arcs,
    polygon: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> bool:
    """Return True if every part of a path is inside ``polygon`` or on its border.

    Each segment is cut at its crossings with the border. The pieces between
    cuts lie entirely on one side of the border, so testing the ends of the
    segment and the midpoint of every piece decides the whole segment.
    """
    boundary = polygon.boundary()
    for arc in arcs.segments():
        crossings = section_intersection_points(
            arc.point1,
            arc.point2,
            boundary,
            tolerance_deg,
            degeneracy_epsilon=degeneracy_epsilon,
        )
        stops = [arc.point1, *crossings, arc.point2]
        samples = [arc.point1, arc.point2] + [
            midpoint(a, b) for a, b in zip(stops, stops[1:])
            if angular_distance(a, b) > tolerance_deg
        ]
        if not all(is_point_in_polygon(p, polygon, tolerance_deg, degeneracy_epsilon) for p in samples):
            return False
    return True


def is_arc_in_polygon(
    arc: Arc,
    polygon: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> bool:
    return is_path_in_polygon(Arcs((arc.point1, arc.point2)), polygon, tolerance_deg, degeneracy_epsilon)
