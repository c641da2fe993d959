"""Domain models for greatcircle.

This module contains the value types the geometry operates on. All models are:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel search)
- Free of trigonometry; derived quantities live in ``greatcircle.core``

Key classes:
- Point: A (lat, lon) position in degrees
- Line: A point plus a bearing
- Arc: A bounded great-circle segment
- Arcs: A multi-segment path
- Polygon: A closed boundary
- IntersectionResult: Tagged point / no-intersection / coincident-circles result
"""

from greatcircle.domain.path import Arc, Arcs, Polygon
from greatcircle.domain.point import Line, Point, wrap_longitude
from greatcircle.domain.result import IntersectionKind, IntersectionResult

__all__: list[str] = [
    # Enums
    "IntersectionKind",
    # Core types
    "Point",
    "Line",
    "Arc",
    "Arcs",
    "Polygon",
    "IntersectionResult",
    # Helpers
    "wrap_longitude",
]
