"""greatcircle - Spherical geometry on the unit sphere.

greatcircle computes bearings, angular distances, midpoints, intermediate and
destination points along great circles, and the intersection points between
great-circle lines, arcs, multi-arc paths and polygon boundaries, including the
self-intersections of a single path. It also measures the distance from a
point to lines, arcs, paths and polygon borders, and tests whether points,
arcs and paths lie on them or inside a polygon.

Example:
    >>> from greatcircle import Point, Arcs, intersection_points
    >>> equator = Arcs([Point(0.0, 0.0), Point(0.0, 10.0)])
    >>> meridian = Arcs([Point(-5.0, 5.0), Point(5.0, 5.0)])
    >>> crossings = intersection_points(equator, meridian)
    >>> len(crossings)
    1
"""

from greatcircle.core import (
    angular_distance,
    bearing,
    destination_point,
    final_bearing,
    intermediate_point,
    intersection_point,
    intersection_points,
    is_path_in_polygon,
    is_point_in_polygon,
    midpoint,
    path_distance,
    path_intermediate_point,
    path_midpoint,
    segment_distance,
    segment_intersection,
    self_intersection_points,
)
from greatcircle.domain import (
    Arc,
    Arcs,
    IntersectionKind,
    IntersectionResult,
    Line,
    Point,
    Polygon,
)

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "Arc",
    "Arcs",
    "IntersectionKind",
    "IntersectionResult",
    "Line",
    "Point",
    "Polygon",
    "__author__",
    "__version__",
    "angular_distance",
    "bearing",
    "destination_point",
    "final_bearing",
    "intermediate_point",
    "intersection_point",
    "intersection_points",
    "is_path_in_polygon",
    "is_point_in_polygon",
    "midpoint",
    "path_distance",
    "path_intermediate_point",
    "path_midpoint",
    "segment_distance",
    "segment_intersection",
    "self_intersection_points",
]
