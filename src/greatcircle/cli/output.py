"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from greatcircle.domain import IntersectionResult, Point
from greatcircle.utils import SearchStats

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point, precision: int = 6) -> str:
    """Format a point as "lat, lon" with fixed precision."""
    return f"{point.lat:.{precision}f}, {point.lon:.{precision}f}"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.1f}s"


def print_value(label: str, value: float, unit: str = "°") -> None:
    """Print a labelled scalar result."""
    console.print(f"{label}: {value:.6f}{unit}")


def print_point(label: str, point: Point) -> None:
    """Print a labelled point result."""
    console.print(f"{label}: {format_point(point)}")


def print_intersection(result: IntersectionResult) -> None:
    """Print a tagged intersection result."""
    if result.is_point:
        print_point("Intersection", result.unwrap())
    elif result.is_coincident:
        console.print(f"[yellow]{SYM_DOT} Coincident great circles[/yellow] (infinitely many intersections)")
    else:
        console.print(f"{SYM_DOT} No intersection")


def print_location(distance: float, on_border: bool, inside: bool | None = None) -> None:
    """Print where a point lies relative to a path or polygon.

    Args:
        distance: Angular distance to the path or polygon border
        on_border: Whether the point is within tolerance of the path or border
        inside: Whether the point is inside the polygon (None for a path)
    """
    print_value("Distance", distance)
    if on_border:
        where = "path" if inside is None else "border"
        console.print(f"[bold green]{SYM_OK}[/bold green] On the {where}")
    if inside is not None:
        console.print(f"{SYM_DOT} {'Inside' if inside else 'Outside'} the polygon")


def print_intersections(points: list[Point], stats: SearchStats | None = None, verbose: bool = False) -> None:
    """Print the points found by an intersection search.

    Args:
        points: Intersection points in result order
        stats: Optional search counters
        verbose: Whether to show the search counters
    """
    if not points:
        console.print(f"{SYM_DOT} No intersections")
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Latitude", justify="right")
        table.add_column("Longitude", justify="right")
        for index, point in enumerate(points, start=1):
            table.add_row(str(index), f"{point.lat:.6f}", f"{point.lon:.6f}")
        console.print(table)
        console.print(f"[bold green]{SYM_OK}[/bold green] {len(points)} intersections")

    if verbose and stats is not None:
        console.print(
            f"  {stats.pairs_tested} segment pairs {SYM_DOT} "
            f"{stats.coincident_pairs} coincident {SYM_DOT} "
            f"{stats.rejected_pairs} rejected {SYM_DOT} "
            f"{_format_time(stats.duration_seconds)}"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
