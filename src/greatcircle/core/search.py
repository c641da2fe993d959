"""Intersection search between multi-arc paths and polygon boundaries.

Results are ordered per segment of the first path, in path order; within one
segment, intersections are sorted by ascending angular distance from that
segment's start point. There is no global re-sort along the first path.
"""

import logging
import time
from collections.abc import Iterable

from greatcircle.config import DEGENERACY_EPSILON, TOLERANCE_DEG
from greatcircle.core.intersection import segment_intersection
from greatcircle.core.trig import angular_distance
from greatcircle.domain import Arcs, Point, Polygon
from greatcircle.utils import SearchStats

logger = logging.getLogger(__name__)


def section_intersection_points(
    start: Point,
    end: Point,
    arcs: Arcs,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    candidates: Iterable[int] | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Intersect one segment with the segments of a path.

    Args:
        start: Start of the segment
        end: End of the segment
        arcs: Path to intersect with
        tolerance_deg: Angular tolerance in degrees
        stats: Optional collector for search counters
        candidates: Indices of the path segments to test (default: all)
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        Finite intersection points sorted by distance from ``start``
    """
    indices = range(arcs.segment_count) if candidates is None else candidates
    found: list[tuple[float, Point]] = []

    for j in indices:
        result = segment_intersection(
            start, end, arcs.points[j], arcs.points[j + 1], tolerance_deg, degeneracy_epsilon
        )
        if stats is not None:
            stats.pairs_tested += 1
            if result.is_coincident:
                stats.coincident_pairs += 1
            elif result.is_none:
                stats.rejected_pairs += 1
        if result.is_point:
            crossing = result.unwrap()
            found.append((angular_distance(start, crossing), crossing))

    found.sort(key=lambda item: item[0])
    if stats is not None:
        stats.intersections_found += len(found)
        stats.section_counts.append(len(found))
    return [crossing for _, crossing in found]


def intersection_points(
    arcs1: Arcs,
    arcs2: Arcs,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Return the intersection points of two paths.

    Every segment of ``arcs1`` is intersected with every segment of ``arcs2``.
    Results with coincident great circles or without an intersection are
    dropped.

    Args:
        arcs1: First path; determines the result order
        arcs2: Second path
        tolerance_deg: Angular tolerance in degrees
        stats: Optional collector for search counters
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        Intersection points, grouped by segment of ``arcs1`` in path order and
        sorted by distance from each segment's start within a group
    """
    if stats is not None:
        stats.start_time = time.time()

    points: list[Point] = []
    for start, end in zip(arcs1.points, arcs1.points[1:]):
        points.extend(
            section_intersection_points(
                start, end, arcs2, tolerance_deg, stats, degeneracy_epsilon=degeneracy_epsilon
            )
        )

    if stats is not None:
        stats.end_time = time.time()
    logger.debug(
        "Path intersection: %d x %d segments, %d intersections",
        arcs1.segment_count, arcs2.segment_count, len(points)
    )
    return points


def path_polygon_intersection_points(
    arcs: Arcs,
    polygon: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Return the intersection points of a path with a polygon boundary."""
    return intersection_points(
        arcs, polygon.boundary(), tolerance_deg, stats, degeneracy_epsilon
    )


def polygon_intersection_points(
    polygon1: Polygon,
    polygon2: Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Return the intersection points of two polygon boundaries."""
    return intersection_points(
        polygon1.boundary(), polygon2.boundary(), tolerance_deg, stats, degeneracy_epsilon
    )


def self_intersection_candidates(arcs: Arcs, index: int) -> list[int]:
    """Return the segments that segment ``index`` is tested against for self-intersection.

    Only later, non-adjacent segments are candidates, so each crossing is
    found once and shared vertices between neighbouring segments are never
    reported. For a closed path the first and last segments are neighbours.
    """
    count = arcs.segment_count
    skip_last = arcs.is_closed and index == 0
    return [j for j in range(index + 2, count) if not (skip_last and j == count - 1)]


def self_intersection_points(
    path: Arcs | Polygon,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Return the points where a path or polygon boundary crosses itself.

    Each crossing is reported once, at the earlier of the two segments
    involved, and results follow the same ordering as ``intersection_points``.

    Args:
        path: Path, or polygon whose boundary is searched
        tolerance_deg: Angular tolerance in degrees
        stats: Optional collector for search counters
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        Self-intersection points (empty for a simple path)
    """
    arcs = path.boundary() if isinstance(path, Polygon) else path
    if stats is not None:
        stats.start_time = time.time()

    points: list[Point] = []
    for i in range(arcs.segment_count):
        points.extend(
            section_intersection_points(
                arcs.points[i],
                arcs.points[i + 1],
                arcs,
                tolerance_deg,
                stats,
                candidates=self_intersection_candidates(arcs, i),
                degeneracy_epsilon=degeneracy_epsilon,
            )
        )

    if stats is not None:
        stats.end_time = time.time()
    logger.debug("Self intersection: %d segments, %d intersections", arcs.segment_count, len(points))
    return points
