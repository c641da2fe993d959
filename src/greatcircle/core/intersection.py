"""Intersections of great-circle lines and arcs.

This module provides:
- intersection_point: Intersection of two great circles given as start point and bearing
- line_intersection: Same, for two Line values
- segment_intersection: Intersection of two bounded segments given by four points
- arc_intersection: Same, for two Arc values

Every function returns an ``IntersectionResult``: a finite point, no (or an
ambiguous) intersection, or coincident great circles with infinitely many
intersections.
"""

from greatcircle.config import DEGENERACY_EPSILON, TOLERANCE_DEG
from greatcircle.core.trig import (
    acosd,
    angular_distance,
    asind,
    atan2d,
    bearing,
    cosd,
    normalize_angle,
    normalize_longitude,
    sind,
)
from greatcircle.domain import Arc, IntersectionResult, Line, Point


def _is_straight(angle: float, tolerance_deg: float) -> bool:
    """True if a normalized angle is within tolerance of 0 or 180 degrees."""
    return abs(angle) <= tolerance_deg or 180.0 - abs(angle) <= tolerance_deg


def intersection_point(
    point1: Point,
    point2: Point,
    bearing13: float,
    bearing23: float,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> IntersectionResult:
    """Intersect two great circles given by start points and bearings.

    Solves the spherical triangle formed by ``point1``, ``point2`` and the
    intersection ``point3``, where ``bearing13`` is the bearing from point1
    towards point3 and ``bearing23`` the bearing from point2 towards point3.

    Outcomes:
    - No intersection when the start points coincide, are antipodal, or sit
      at a pole, since the triangle is then undefined.
    - Coincident circles when both bearings run along the great circle
      through the two start points.
    - No intersection when the bearings diverge to opposite sides of that
      great circle, since the forward intersection is ambiguous.
    - Otherwise the intersection ahead of both start points.

    When only one bearing runs along the base great circle, the other start
    point is the intersection if it lies ahead on that bearing, and there is no
    intersection if it lies behind.

    Args:
        point1: Start point of the first great circle
        point2: Start point of the second great circle
        bearing13: Bearing in degrees from point1 towards the intersection
        bearing23: Bearing in degrees from point2 towards the intersection
        tolerance_deg: Tolerance for classifying angles as 0 or 180 degrees
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        IntersectionResult with the intersection point or its degeneracy

    Source: edwilliams.org/avform.htm
    """
    delta = point2 - point1
    dist12 = angular_distance(point1, point2)
    sin_dist12 = sind(dist12)
    if (
        abs(sin_dist12 * cosd(point1.lat)) < degeneracy_epsilon
        or abs(sin_dist12 * cosd(point2.lat)) < degeneracy_epsilon
    ):
        return IntersectionResult.none()

    theta_a = acosd(
        (sind(point2.lat) - sind(point1.lat) * cosd(dist12)) / (sin_dist12 * cosd(point1.lat))
    )
    theta_b = acosd(
        (sind(point1.lat) - sind(point2.lat) * cosd(dist12)) / (sin_dist12 * cosd(point2.lat))
    )
    if sind(delta.lon) > 0.0:
        theta12 = theta_a
        theta21 = 360.0 - theta_b
    else:
        theta12 = 360.0 - theta_a
        theta21 = theta_b

    alpha1 = normalize_angle(bearing13 - theta12)
    alpha2 = normalize_angle(theta21 - bearing23)
    straight1 = _is_straight(alpha1, tolerance_deg)
    straight2 = _is_straight(alpha2, tolerance_deg)

    if straight1 and straight2:
        return IntersectionResult.coincident()
    if straight1:
        if abs(alpha1) <= tolerance_deg:
            return IntersectionResult.found(point2.normalized())
        return IntersectionResult.none()
    if straight2:
        if abs(alpha2) <= tolerance_deg:
            return IntersectionResult.found(point1.normalized())
        return IntersectionResult.none()
    if sind(alpha1) * sind(alpha2) < 0.0:
        return IntersectionResult.none()

    alpha3 = acosd(-cosd(alpha1) * cosd(alpha2) + sind(alpha1) * sind(alpha2) * cosd(dist12))
    dist13 = atan2d(
        sin_dist12 * sind(alpha1) * sind(alpha2),
        cosd(alpha2) + cosd(alpha1) * cosd(alpha3),
    )
    lat3 = asind(
        sind(point1.lat) * cosd(dist13) + cosd(point1.lat) * sind(dist13) * cosd(bearing13)
    )
    dlon13 = atan2d(
        sind(bearing13) * sind(dist13) * cosd(point1.lat),
        cosd(dist13) - sind(point1.lat) * sind(lat3),
    )
    return IntersectionResult.found(Point(lat3, normalize_longitude(point1.lon + dlon13)))


def line_intersection(
    line1: Line,
    line2: Line,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> IntersectionResult:
    return intersection_point(
        line1.point, line2.point, line1.bearing, line2.bearing, tolerance_deg, degeneracy_epsilon
    )


def segment_intersection(
    point1: Point,
    point2: Point,
    point3: Point,
    point4: Point,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> IntersectionResult:
    """Intersect the segments point1 -> point2 and point3 -> point4.

    The unbounded intersection is computed from each segment's start point and
    initial bearing. A finite intersection is kept only if its distance from
    each segment's start does not exceed that segment's length by more than
    ``tolerance_deg``. Coincident great circles are returned as such without a
    bounds check.

    Args:
        point1: Start of the first segment
        point2: End of the first segment
        point3: Start of the second segment
        point4: End of the second segment
        tolerance_deg: Angular tolerance in degrees
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        IntersectionResult for the two segments
    """
    result = intersection_point(
        point1,
        point3,
        bearing(point1, point2),
        bearing(point3, point4),
        tolerance_deg,
        degeneracy_epsilon,
    )
    if not result.is_point:
        return result

    crossing = result.unwrap()
    within_first = angular_distance(point1, point2) + tolerance_deg >= angular_distance(point1, crossing)
    within_second = angular_distance(point3, point4) + tolerance_deg >= angular_distance(point3, crossing)
    if within_first and within_second:
        return result
    return IntersectionResult.none()


def arc_intersection(
    arc1: Arc,
    arc2: Arc,
    tolerance_deg: float = TOLERANCE_DEG,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> IntersectionResult:
    return segment_intersection(
        arc1.point1, arc1.point2, arc2.point1, arc2.point2, tolerance_deg, degeneracy_epsilon
    )
