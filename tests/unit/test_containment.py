"""Unit tests for on-border and inside tests."""

import pytest

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
from greatcircle.core.trig import angular_distance
from greatcircle.domain import Arc, Arcs, Line, Point, Polygon
from greatcircle.exceptions import AmbiguousGeometryError


@pytest.fixture
def square() -> Polygon:
    """Square spanning 10 degrees of latitude and longitude."""
    return Polygon.from_tuples([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)])


@pytest.fixture
def l_shape() -> Polygon:
    """Square with its north-east quarter cut away."""
    return Polygon.from_tuples(
        [(0.0, 0.0), (0.0, 10.0), (5.0, 10.0), (5.0, 5.0), (10.0, 5.0), (10.0, 0.0)]
    )


class TestOnTests:
    """Tests for points on lines, arcs, paths and borders."""

    def test_on_line(self) -> None:
        line = Line(Point(0.0, 0.0), 90.0)
        assert is_on_line(Point(0.0, 50.0), line)
        assert is_on_line(Point(0.0, -130.0), line)
        assert not is_on_line(Point(0.5, 50.0), line)

    def test_on_segment(self) -> None:
        """Points on the great circle past the end are not on the arc."""
        start, end = Point(0.0, 0.0), Point(0.0, 10.0)
        assert is_on_segment(Point(0.0, 5.0), start, end)
        assert is_on_segment(end, start, end)
        assert not is_on_segment(Point(0.0, 15.0), start, end)

    def test_tolerance(self) -> None:
        """Distances within the tolerance count as on the arc."""
        arc = Arc(Point(0.0, 0.0), Point(0.0, 10.0))
        assert not is_on_arc(Point(0.001, 5.0), arc)
        assert is_on_arc(Point(0.001, 5.0), arc, tolerance_deg=0.01)

    def test_on_path(self) -> None:
        path = Arcs.from_tuples([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)])
        assert is_on_path(Point(5.0, 10.0), path)
        assert not is_on_path(Point(5.0, 5.0), path)

    def test_on_polygon_border(self, square: Polygon) -> None:
        """The implicit closing edge belongs to the border."""
        assert is_on_polygon_border(Point(0.0, 5.0), square)
        assert is_on_polygon_border(Point(5.0, 0.0), square)
        assert not is_on_polygon_border(Point(5.0, 5.0), square)


class TestPointInPolygon:
    """Tests for point-in-polygon by counting border crossings."""

    def test_inside_square(self, square: Polygon) -> None:
        assert is_point_in_polygon(Point(5.0, 5.0), square)
        assert boundary_crossings(Point(5.0, 5.0), square) == 1

    @pytest.mark.parametrize("point", [Point(15.0, 5.0), Point(5.0, -5.0), Point(-40.0, 100.0)])
    def test_outside_square(self, square: Polygon, point: Point) -> None:
        assert not is_point_in_polygon(point, square)

    def test_border_counts_as_inside(self, square: Polygon) -> None:
        assert is_point_in_polygon(Point(0.0, 5.0), square)
        assert is_point_in_polygon(Point(10.0, 10.0), square)

    def test_concave_polygon(self, l_shape: Polygon) -> None:
        """The cut-away quarter is outside."""
        assert is_point_in_polygon(Point(8.0, 3.0), l_shape)
        assert is_point_in_polygon(Point(2.0, 7.0), l_shape)
        assert not is_point_in_polygon(Point(7.5, 7.5), l_shape)

    def test_outside_reference_is_far_from_polygon(self, square: Polygon) -> None:
        """The reference point lies opposite the polygon."""
        reference = outside_reference(square)
        assert angular_distance(reference, Point(5.0, 5.0)) > 170.0
        assert not is_point_in_polygon(reference, square)

    def test_balanced_polygon_is_ambiguous(self) -> None:
        """A polygon along a great circle has no distinguishable interior."""
        equator = Polygon.from_tuples([(0.0, 0.0), (0.0, 120.0), (0.0, -120.0)])
        with pytest.raises(AmbiguousGeometryError):
            is_point_in_polygon(Point(10.0, 10.0), equator)


class TestPathInPolygon:
    """Tests for arcs and paths inside a polygon."""

    def test_arc_inside(self, l_shape: Polygon) -> None:
        assert is_arc_in_polygon(Arc(Point(2.0, 3.0), Point(3.0, 8.0)), l_shape)

    def test_arc_leaving(self, l_shape: Polygon) -> None:
        """An arc that ends outside is not inside."""
        assert not is_arc_in_polygon(Arc(Point(8.0, 3.0), Point(8.0, 8.0)), l_shape)

    def test_arc_passing_through_cut(self, l_shape: Polygon) -> None:
        """Both ends inside is not enough when the arc crosses the cut-away quarter."""
        assert not is_arc_in_polygon(Arc(Point(8.0, 3.0), Point(3.0, 8.0)), l_shape)

    def test_arc_along_border(self, square: Polygon) -> None:
        """Arcs on the border are inside."""
        assert is_arc_in_polygon(Arc(Point(0.0, 2.0), Point(0.0, 8.0)), square)

    def test_path(self, l_shape: Polygon) -> None:
        inside = Arcs.from_tuples([(2.0, 3.0), (3.0, 8.0), (2.0, 6.0)])
        through_cut = Arcs.from_tuples([(2.0, 3.0), (3.0, 8.0), (8.0, 3.0)])
        assert is_path_in_polygon(inside, l_shape)
        assert not is_path_in_polygon(through_cut, l_shape)
