"""Coordinate readers for points and paths.

This module parses points from command-line text and loads paths from JSON
files into domain models.

Text format:
    "lat,lon" for a point, "lat,lon;lat,lon;..." for a path

JSON format:
    [[lat, lon], ...] or {"points": [[lat, lon], ...]}
"""

import json
from pathlib import Path

from greatcircle.domain import Point
from greatcircle.exceptions import InvalidPointError, PathFileError, PointParseError


def parse_point(text: str) -> Point:
    """Parse a "lat,lon" pair in degrees.

    Raises:
        PointParseError: If the text is not two numbers or is not a valid position
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise PointParseError(text, "expected 'lat,lon'")

    try:
        lat, lon = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise PointParseError(text, str(e)) from e

    try:
        return Point(lat, lon).validate()
    except InvalidPointError as e:
        raise PointParseError(text, e.reason) from e


def parse_points(text: str) -> list[Point]:
    """Parse a semicolon-separated list of "lat,lon" pairs."""
    return [parse_point(chunk) for chunk in text.split(";") if chunk.strip()]


def load_points(path: Path) -> list[Point]:
    """Load a list of points from a JSON file.

    Raises:
        PathFileError: If the file is missing, is not JSON, or has the wrong shape
    """
    if not path.exists():
        raise PathFileError(str(path), "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PathFileError(str(path), f"invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("points")
    if not isinstance(data, list):
        raise PathFileError(str(path), "expected a list of [lat, lon] pairs")

    points = []
    for index, pair in enumerate(data):
        if not (isinstance(pair, list | tuple) and len(pair) == 2):
            raise PathFileError(str(path), f"entry {index} is not a [lat, lon] pair")
        try:
            points.append(Point(float(pair[0]), float(pair[1])).validate())
        except (TypeError, ValueError, InvalidPointError) as e:
            raise PathFileError(str(path), f"entry {index}: {e}") from e
    return points


def read_points(text: str) -> list[Point]:
    """Read points from inline text, or from a JSON file when prefixed with '@'."""
    if text.startswith("@"):
        return load_points(Path(text[1:]))
    return parse_points(text)
