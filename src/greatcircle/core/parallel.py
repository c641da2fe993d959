"""Parallel intersection search over worker processes.

The search is split by segment of the first path. Each worker intersects one
segment with the whole second path, and results are collected in segment
order, so the output is identical to ``intersection_points``.

Key components:
- search_section: Top-level picklable function for parallel execution
- parallel_intersection_points: Orchestrates the workers
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Any

from greatcircle.config import DEGENERACY_EPSILON, TOLERANCE_DEG
from greatcircle.core.search import intersection_points, section_intersection_points
from greatcircle.domain import Arcs, Point
from greatcircle.utils import SearchStats

logger = logging.getLogger(__name__)


def search_section(
    section_dict: dict[str, Any],
    arcs_dict: dict[str, Any],
    tolerance_deg: float,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> dict[str, Any]:
    """Intersect one serialized segment with a serialized path.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        section_dict: {"start": point_dict, "end": point_dict}
        arcs_dict: Serialized path (from Arcs.to_dict())
        tolerance_deg: Angular tolerance in degrees
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        {"points": [point_dict, ...], "stats": stats_dict}
    """
    stats = SearchStats()
    points = section_intersection_points(
        Point.from_dict(section_dict["start"]),
        Point.from_dict(section_dict["end"]),
        Arcs.from_dict(arcs_dict),
        tolerance_deg,
        stats,
        degeneracy_epsilon=degeneracy_epsilon,
    )
    return {"points": [p.to_dict() for p in points], "stats": stats.to_dict()}


def parallel_intersection_points(
    arcs1: Arcs,
    arcs2: Arcs,
    max_workers: int | None = None,
    tolerance_deg: float = TOLERANCE_DEG,
    stats: SearchStats | None = None,
    degeneracy_epsilon: float = DEGENERACY_EPSILON,
) -> list[Point]:
    """Return the intersection points of two paths using worker processes.

    Args:
        arcs1: First path; determines the result order
        arcs2: Second path
        max_workers: Maximum worker processes (None = auto)
        tolerance_deg: Angular tolerance in degrees
        stats: Optional collector for search counters
        degeneracy_epsilon: Threshold for degenerate start points

    Returns:
        The same points, in the same order, as ``intersection_points``
    """
    if max_workers == 1 or arcs1.segment_count == 1:
        return intersection_points(arcs1, arcs2, tolerance_deg, stats, degeneracy_epsilon)

    start_time = time.time()
    sections = [
        {"start": start.to_dict(), "end": end.to_dict()}
        for start, end in zip(arcs1.points, arcs1.points[1:])
    ]

    logger.debug(
        "Starting parallel search: %d sections, max_workers=%s", len(sections), max_workers
    )

    points: list[Point] = []
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        # map() yields in submission order, which keeps the per-segment ordering
        for result in executor.map(
            search_section,
            sections,
            repeat(arcs2.to_dict()),
            repeat(tolerance_deg),
            repeat(degeneracy_epsilon),
        ):
            points.extend(Point.from_dict(p) for p in result["points"])
            if stats is not None:
                stats.merge(SearchStats.from_dict(result["stats"]))

    if stats is not None:
        stats.start_time = start_time
        stats.end_time = time.time()
    return points
