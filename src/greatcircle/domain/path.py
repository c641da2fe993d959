"""Arc, path and polygon types.

This module defines:
- Arc: The shorter great-circle segment between two points
- Arcs: An ordered path of consecutive arcs
- Polygon: A closed boundary, reduced to its boundary path for geometry
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from greatcircle.domain.point import Point
from greatcircle.exceptions import InvalidPathError


@dataclass(frozen=True, slots=True)
class Arc:
    """A bounded great-circle segment from ``point1`` to ``point2``.

    Bearing and angular length are derived by ``greatcircle.core.trig``,
    not stored.
    """

    point1: Point
    point2: Point

    def reversed(self) -> "Arc":
        """Return the same segment traversed in the opposite direction."""
        return Arc(self.point2, self.point1)


@dataclass(frozen=True)
class Arcs:
    """An ordered path of at least two points.

    Consecutive points form the arcs ``points[i] -> points[i + 1]``. The path is
    not required to be closed.

    Attributes:
        points: Path vertices in traversal order
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) < 2:
            raise InvalidPathError("a path needs at least two points", len(points))
        object.__setattr__(self, "points", points)

    @classmethod
    def from_tuples(cls, coordinates: Iterable[tuple[float, float]]) -> "Arcs":
        """Build a path from (lat, lon) pairs."""
        return cls(tuple(Point(lat, lon) for lat, lon in coordinates))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def segment_count(self) -> int:
        """Number of arcs in the path."""
        return len(self.points) - 1

    @property
    def is_closed(self) -> bool:
        """True if the path ends where it starts."""
        return self.points[0] == self.points[-1]

    def segments(self) -> Iterator[Arc]:
        """Yield the consecutive arcs of the path in order."""
        for start, end in zip(self.points, self.points[1:]):
            yield Arc(start, end)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Arcs":
        """Deserialize from dictionary."""
        return cls(tuple(Point.from_dict(p) for p in data["points"]))


@dataclass(frozen=True)
class Polygon:
    """A closed boundary given by its vertices.

    The first point may be repeated at the end; if it is not, the boundary is
    closed implicitly.

    Attributes:
        points: Boundary vertices in order
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(set(points)) < 3:
            raise InvalidPathError("a polygon needs at least three distinct vertices", len(points))
        object.__setattr__(self, "points", points)

    @classmethod
    def from_tuples(cls, coordinates: Iterable[tuple[float, float]]) -> "Polygon":
        """Build a polygon from (lat, lon) pairs."""
        return cls(tuple(Point(lat, lon) for lat, lon in coordinates))

    def boundary(self) -> Arcs:
        """Return the closed boundary path (first point repeated at the end)."""
        if self.points[0] == self.points[-1]:
            return Arcs(self.points)
        return Arcs((*self.points, self.points[0]))
