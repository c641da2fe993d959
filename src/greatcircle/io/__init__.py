"""Input layer for greatcircle.

This module provides:
- parse_point / parse_points: Coordinates from command-line text
- load_points: Paths from JSON files
- read_points: Inline text or '@file.json'
"""

from greatcircle.io.reader import load_points, parse_point, parse_points, read_points

__all__ = ["load_points", "parse_point", "parse_points", "read_points"]
