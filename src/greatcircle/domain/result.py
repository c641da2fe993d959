"""Tagged result of a great-circle intersection.

An intersection has three legitimate outcomes, and callers must tell them apart:
a single finite point, no (or an ambiguous) intersection, or infinitely many
intersections because the two great circles coincide.
"""

from dataclasses import dataclass
from enum import Enum, auto

from greatcircle.domain.point import Point
from greatcircle.exceptions import NoIntersectionError


class IntersectionKind(Enum):
    """Outcome of an intersection computation."""

    POINT = auto()
    NO_INTERSECTION = auto()
    COINCIDENT_CIRCLES = auto()


@dataclass(frozen=True, slots=True)
class IntersectionResult:
    """Result of intersecting two great circles or two arcs.

    ``point`` is set only when ``kind`` is ``IntersectionKind.POINT``.
    """

    kind: IntersectionKind
    point: Point | None = None

    def __post_init__(self) -> None:
        if (self.kind is IntersectionKind.POINT) != (self.point is not None):
            raise ValueError(f"{self.kind.name} result with inconsistent point: {self.point}")

    @classmethod
    def found(cls, point: Point) -> "IntersectionResult":
        return cls(IntersectionKind.POINT, point)

    @classmethod
    def none(cls) -> "IntersectionResult":
        return cls(IntersectionKind.NO_INTERSECTION)

    @classmethod
    def coincident(cls) -> "IntersectionResult":
        return cls(IntersectionKind.COINCIDENT_CIRCLES)

    @property
    def is_point(self) -> bool:
        return self.kind is IntersectionKind.POINT

    @property
    def is_none(self) -> bool:
        return self.kind is IntersectionKind.NO_INTERSECTION

    @property
    def is_coincident(self) -> bool:
        return self.kind is IntersectionKind.COINCIDENT_CIRCLES

    def unwrap(self) -> Point:
        """Return the intersection point.

        Raises:
            NoIntersectionError: If the result is not a single finite point
        """
        if self.point is None:
            raise NoIntersectionError(self.kind.name)
        return self.point
