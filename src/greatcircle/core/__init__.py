"""Core algorithms for greatcircle.

This module contains the spherical geometry algorithms:

- Primitive trigonometry (bearings, angular distance, normalization)
- Interpolation along great circles and paths
- Pairwise intersection of great circles and arcs
- Intersection search between paths and polygon boundaries
- Distance to, and position relative to, lines, paths and polygons

All functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- bearing / final_bearing: Initial and final bearing between two points
- angular_distance: Central angle between two points
- midpoint / intermediate_point / destination_point: Positions on great circles
- intersection_point / segment_intersection: Pairwise intersections
- intersection_points / self_intersection_points: Path intersection search
- segment_distance / path_distance: Distance from a point to arcs and paths
- is_on_path / is_point_in_polygon: On-border and inside tests
- parallel_intersection_points: Path intersection search on worker processes
"""

from greatcircle.core.containment import (
    boundary_crossings,
    is_arc_in_polygon,
    is_on_arc,
    is_on_line,
    is_on_path,
    is_on_polygon_border,
    is_on_segment,
    is_path_in_polygon,
    is_point_in_polygon,
    outside_reference,
)
from greatcircle.core.distance import (
    along_track_distance,
    arc_distance,
    cross_track_distance,
    line_distance,
    path_distance,
    polygon_border_distance,
    segment_distance,
)
from greatcircle.core.interpolation import (
    arc_intermediate_point,
    arc_midpoint,
    destination_point,
    intermediate_point,
    line_destination_point,
    midpoint,
    path_intermediate_point,
    path_midpoint,
)
from greatcircle.core.intersection import (
    arc_intersection,
    intersection_point,
    line_intersection,
    segment_intersection,
)
from greatcircle.core.parallel import parallel_intersection_points
from greatcircle.core.search import (
    intersection_points,
    path_polygon_intersection_points,
    polygon_intersection_points,
    self_intersection_points,
)
from greatcircle.core.trig import (
    angular_distance,
    angular_length,
    arc_bearing,
    arc_final_bearing,
    arc_length,
    bearing,
    final_bearing,
    normalize_angle,
    normalize_bearing,
    normalize_longitude,
)

__all__ = [
    # Trigonometry
    "angular_distance",
    "angular_length",
    "arc_bearing",
    "arc_final_bearing",
    "arc_length",
    "bearing",
    "final_bearing",
    "normalize_angle",
    "normalize_bearing",
    "normalize_longitude",
    # Interpolation
    "arc_intermediate_point",
    "arc_midpoint",
    "destination_point",
    "intermediate_point",
    "line_destination_point",
    "midpoint",
    "path_intermediate_point",
    "path_midpoint",
    # Intersection
    "arc_intersection",
    "intersection_point",
    "line_intersection",
    "segment_intersection",
    # Search
    "intersection_points",
    "parallel_intersection_points",
    "path_polygon_intersection_points",
    "polygon_intersection_points",
    "self_intersection_points",
    # Distance
    "along_track_distance",
    "arc_distance",
    "cross_track_distance",
    "line_distance",
    "path_distance",
    "polygon_border_distance",
    "segment_distance",
    # Containment
    "boundary_crossings",
    "is_arc_in_polygon",
    "is_on_arc",
    "is_on_line",
    "is_on_path",
    "is_on_polygon_border",
    "is_on_segment",
    "is_path_in_polygon",
    "is_point_in_polygon",
    "outside_reference",
]
