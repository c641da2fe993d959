"""Unit tests for path and polygon intersection search.

Tests cover:
- Path vs path, path vs polygon and polygon vs polygon searches
- Result ordering per segment of the first path
- Self-intersections of paths and polygon boundaries
- Search statistics
"""

import pytest

from greatcircle.core.search import (
    intersection_points,
    path_polygon_intersection_points,
    polygon_intersection_points,
    self_intersection_candidates,
    self_intersection_points,
)
from greatcircle.core.trig import angular_distance
from greatcircle.domain import Arcs, Polygon
from greatcircle.utils import SearchStats


@pytest.fixture
def zigzag() -> Arcs:
    """Path crossing the equator at longitudes 25, 15 and 5, in that order."""
    return Arcs.from_tuples([(-5.0, 25.0), (5.0, 25.0), (-5.0, 5.0), (5.0, 5.0)])


@pytest.fixture
def square() -> Polygon:
    """Open square polygon, closed implicitly."""
    return Polygon.from_tuples([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)])


class TestIntersectionPoints:
    """Tests for intersecting two paths."""

    def test_single_crossing(self) -> None:
        """An equator path and a meridian path cross once."""
        equator = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0)])
        meridian = Arcs.from_tuples([(-5.0, 5.0), (5.0, 5.0)])
        points = intersection_points(equator, meridian)
        assert len(points) == 1
        assert points[0].lat == pytest.approx(0.0, abs=1e-9)
        assert points[0].lon == pytest.approx(5.0, abs=1e-9)

    def test_no_crossing(self) -> None:
        """Paths that never meet give an empty result."""
        path1 = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0)])
        path2 = Arcs.from_tuples([(20.0, 0.0), (20.0, 10.0)])
        assert intersection_points(path1, path2) == []

    def test_sorted_by_distance_within_segment(self, zigzag: Arcs) -> None:
        """Crossings on one segment come out nearest-first, not in path-2 order."""
        equator = Arcs.from_tuples([(0.0, 0.0), (0.0, 30.0)])
        points = intersection_points(equator, zigzag)
        assert [p.lon for p in points] == pytest.approx([5.0, 15.0, 25.0], abs=1e-6)
        assert all(p.lat == pytest.approx(0.0, abs=1e-9) for p in points)

    def test_ordering_is_per_segment(self, zigzag: Arcs) -> None:
        """Segments of path 1 are kept in path order; there is no global sort."""
        out_and_back = Arcs.from_tuples([(0.0, 0.0), (0.0, 30.0), (0.0, 0.0)])
        points = intersection_points(out_and_back, zigzag)
        assert [p.lon for p in points] == pytest.approx([5.0, 15.0, 25.0, 25.0, 15.0, 5.0], abs=1e-6)

    def test_distances_ascend_on_each_segment(self, zigzag: Arcs) -> None:
        """Restricted to a segment's crossings, distances from its start ascend."""
        out_and_back = Arcs.from_tuples([(0.0, 0.0), (0.0, 30.0), (0.0, 0.0)])
        points = intersection_points(out_and_back, zigzag)
        for start, section in ((out_and_back.points[0], points[:3]), (out_and_back.points[1], points[3:])):
            distances = [angular_distance(start, p) for p in section]
            assert distances == sorted(distances)

    def test_coincident_segments_are_dropped(self) -> None:
        """Overlapping segments on one great circle contribute no points."""
        path1 = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0)])
        path2 = Arcs.from_tuples([(0.0, 5.0), (0.0, 15.0)])
        stats = SearchStats()
        assert intersection_points(path1, path2, stats=stats) == []
        assert stats.coincident_pairs == 1

    def test_degeneracy_epsilon_is_passed_to_each_pair(self) -> None:
        """A meridian starting just off the equator path's start is degenerate under a coarse threshold."""
        equator = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0)])
        meridian = Arcs.from_tuples([(0.0, 1e-7), (10.0, 1e-7)])
        assert len(intersection_points(equator, meridian)) == 1
        assert intersection_points(equator, meridian, degeneracy_epsilon=1e-8) == []

    def test_stats(self, zigzag: Arcs) -> None:
        """Counters cover every segment pair."""
        equator = Arcs.from_tuples([(0.0, 0.0), (0.0, 30.0)])
        stats = SearchStats()
        intersection_points(equator, zigzag, stats=stats)
        assert stats.pairs_tested == 3
        assert stats.intersections_found == 3
        assert stats.rejected_pairs == 0
        assert stats.section_counts == [3]
        assert stats.start_time is not None
        assert stats.end_time is not None


class TestPolygonIntersections:
    """Tests for the polygon variants."""

    def test_path_crosses_square(self, square: Polygon) -> None:
        """A path through the square crosses the closing edge and the opposite edge."""
        path = Arcs.from_tuples([(5.0, -5.0), (5.0, 15.0)])
        points = path_polygon_intersection_points(path, square)
        assert [p.lon for p in points] == pytest.approx([0.0, 10.0], abs=1e-6)
        assert all(5.0 < p.lat < 5.2 for p in points)

    def test_overlapping_squares(self, square: Polygon) -> None:
        """Two overlapping squares cross twice."""
        shifted = Polygon.from_tuples([(5.0, 5.0), (5.0, 15.0), (15.0, 15.0), (15.0, 5.0)])
        assert len(polygon_intersection_points(square, shifted)) == 2

    def test_disjoint_squares(self, square: Polygon) -> None:
        """Squares far apart do not cross."""
        far = Polygon.from_tuples([(40.0, 40.0), (40.0, 50.0), (50.0, 50.0), (50.0, 40.0)])
        assert polygon_intersection_points(square, far) == []


class TestSelfIntersectionPoints:
    """Tests for self-intersections."""

    def test_square_has_none(self, square: Polygon) -> None:
        """A simple polygon does not cross itself."""
        assert self_intersection_points(square) == []

    def test_closed_square_path_has_none(self) -> None:
        """The shared start/end vertex of a closed path is not a crossing."""
        closed = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0)])
        assert self_intersection_points(closed) == []

    def test_bowtie_path(self) -> None:
        """The diagonals of a bowtie cross once, half-way across."""
        bowtie = Arcs.from_tuples([(0.0, 0.0), (10.0, 10.0), (0.0, 10.0), (10.0, 0.0)])
        stats = SearchStats()
        points = self_intersection_points(bowtie, stats=stats)
        assert len(points) == 1
        assert points[0].lon == pytest.approx(5.0, abs=1e-6)
        assert 4.9 < points[0].lat < 5.2
        assert stats.pairs_tested == 1

    def test_bowtie_polygon(self) -> None:
        """A bowtie polygon reports its crossing once."""
        bowtie = Polygon.from_tuples([(0.0, 0.0), (10.0, 10.0), (0.0, 10.0), (10.0, 0.0)])
        points = self_intersection_points(bowtie)
        assert len(points) == 1
        assert points[0].lon == pytest.approx(5.0, abs=1e-6)

    def test_two_point_path(self) -> None:
        """A single segment cannot cross itself."""
        assert self_intersection_points(Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0)])) == []

    def test_candidates_skip_neighbours(self) -> None:
        """Adjacent segments, including first/last of a closed path, are skipped."""
        closed = Arcs.from_tuples([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])
        assert self_intersection_candidates(closed, 0) == [2]
        assert self_intersection_candidates(closed, 1) == [3]
        assert self_intersection_candidates(closed, 2) == []

        open_path = Arcs.from_tuples([(0, 0), (0, 10), (10, 10), (10, 0), (20, 0)])
        assert self_intersection_candidates(open_path, 0) == [2, 3]
