"""Exception hierarchy for greatcircle."""


class GreatCircleError(Exception):
    """Base exception for all greatcircle errors."""

    pass


class GeometryError(GreatCircleError):
    """Errors in geometric inputs or calculations."""

    pass


class InvalidPathError(GeometryError):
    """Path or polygon does not have enough points."""

    def __init__(self, reason: str, point_count: int) -> None:
        self.reason = reason
        self.point_count = point_count
        super().__init__(f"Invalid path ({point_count} points): {reason}")


class InvalidPointError(GeometryError):
    """Point coordinates are outside the valid range."""

    def __init__(self, lat: float, lon: float, reason: str) -> None:
        self.lat = lat
        self.lon = lon
        self.reason = reason
        super().__init__(f"Invalid point ({lat}, {lon}): {reason}")


class AmbiguousGeometryError(GeometryError):
    """The requested construction has no unique answer."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Ambiguous {operation}: {reason}")


class NoIntersectionError(GeometryError):
    """A finite intersection point was requested but none exists."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No finite intersection point (result: {kind})")


class InputError(GreatCircleError):
    """Errors related to reading coordinates from text or files."""

    pass


class PointParseError(InputError):
    """Coordinate text could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse point '{text}': {reason}")


class PathFileError(InputError):
    """Error reading a path file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read path file '{path}': {reason}")
