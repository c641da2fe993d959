"""CLI application entry point for greatcircle.

This module provides the main CLI interface using Typer.

Points are given as "lat,lon" in degrees and paths as "lat,lon;lat,lon;...",
or as "@file.json". Put "--" before arguments that start with "-".
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from greatcircle import __version__
from greatcircle.cli.output import (
    console,
    print_error,
    print_intersection,
    print_intersections,
    print_location,
    print_point,
    print_value,
)
from greatcircle.config import (
    DEGENERACY_EPSILON,
    TOLERANCE_DEG,
    GeometryConfig,
    GreatCircleSettings,
    LoggingConfig,
    SearchConfig,
)
from greatcircle.core import (
    angular_distance,
    bearing,
    destination_point,
    final_bearing,
    intermediate_point,
    intersection_point,
    intersection_points,
    is_point_in_polygon,
    midpoint,
    parallel_intersection_points,
    path_distance,
    path_intermediate_point,
    path_midpoint,
    polygon_border_distance,
    self_intersection_points,
)
from greatcircle.domain import Arcs, Polygon
from greatcircle.exceptions import GreatCircleError
from greatcircle.io import parse_point, read_points
from greatcircle.utils import SearchLogger, SearchStats, configure_logging

# Create the Typer app
app = typer.Typer(
    name="greatcircle",
    help="Bearings, distances, interpolation and intersections on the unit sphere.",
    add_completion=False,
    no_args_is_help=True,
)

ToleranceOption = Annotated[
    float,
    typer.Option(
        "--tolerance",
        "-t",
        help="Angular tolerance in degrees",
        min=0.0,
    ),
]

EpsilonOption = Annotated[
    float,
    typer.Option(
        "--degeneracy-epsilon",
        help="Threshold below which start points count as degenerate",
        min=0.0,
    ),
]


@dataclass
class CliState:
    """Settings and logger shared by all commands of one invocation."""

    settings: GreatCircleSettings
    log: SearchLogger
    verbose: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]greatcircle[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="No log output on the console",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Spherical geometry on the unit sphere (angles in degrees)."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = GreatCircleSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level if not quiet else "WARNING"),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, log=SearchLogger(logger), verbose=verbose)


@contextmanager
def _handle_errors(state: CliState, operation: str) -> Iterator[None]:
    """Turn library errors into a message and exit code 1."""
    try:
        yield
    except GreatCircleError as e:
        state.log.log_error(operation, e)
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except ValidationError as e:
        print_error("Invalid setting", details=str(e))
        raise typer.Exit(code=1) from e


def _geometry(tolerance: float, epsilon: float = DEGENERACY_EPSILON) -> GeometryConfig:
    return GeometryConfig(tolerance_deg=tolerance, degeneracy_epsilon=epsilon)


@app.command("bearing")
def bearing_command(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Start point 'lat,lon'", show_default=False)],
    end: Annotated[str, typer.Argument(help="End point 'lat,lon'", show_default=False)],
    final: Annotated[
        bool,
        typer.Option("--final", help="Show the final bearing on arrival instead"),
    ] = False,
) -> None:
    """Initial (or final) bearing from START to END, clockwise from north."""
    state: CliState = ctx.obj
    with _handle_errors(state, "bearing"):
        point1, point2 = parse_point(start), parse_point(end)
        value = final_bearing(point1, point2) if final else bearing(point1, point2)
        state.log.log_operation("bearing", final=final, value=value)
        print_value("Final bearing" if final else "Bearing", value)


@app.command("distance")
def distance_command(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Start point 'lat,lon'", show_default=False)],
    end: Annotated[str, typer.Argument(help="End point 'lat,lon'", show_default=False)],
    radius: Annotated[
        float | None,
        typer.Option("--radius", "-r", help="Sphere radius; also print the arc length", min=0.0),
    ] = None,
) -> None:
    """Angular distance between START and END."""
    state: CliState = ctx.obj
    with _handle_errors(state, "distance"):
        value = angular_distance(parse_point(start), parse_point(end))
        state.log.log_operation("distance", value=value)
        print_value("Angular distance", value)
        if radius is not None:
            print_value("Arc length", radius * math.radians(value), unit="")


@app.command("midpoint")
def midpoint_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Two points, or a path", show_default=False)],
) -> None:
    """Half-way point between two points, or along a path."""
    state: CliState = ctx.obj
    with _handle_errors(state, "midpoint"):
        points = read_points(path)
        if len(points) == 2:
            result = midpoint(points[0], points[1])
        else:
            result = path_midpoint(Arcs(points))
        state.log.log_operation("midpoint", lat=result.lat, lon=result.lon)
        print_point("Midpoint", result)


@app.command("intermediate")
def intermediate_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Two points, or a path", show_default=False)],
    fraction: Annotated[
        float,
        typer.Option("--fraction", "-f", help="Fraction along the arc or path (0 = start, 1 = end)"),
    ] = 0.5,
    tolerance: ToleranceOption = TOLERANCE_DEG,
) -> None:
    """Point at FRACTION along two points' great circle, or along a path."""
    state: CliState = ctx.obj
    with _handle_errors(state, "intermediate"):
        geometry = _geometry(tolerance)
        points = read_points(path)
        if len(points) == 2:
            result = intermediate_point(points[0], points[1], fraction, geometry.tolerance_deg)
        else:
            result = path_intermediate_point(Arcs(points), fraction, geometry.tolerance_deg)
        state.log.log_operation("intermediate", fraction=fraction, lat=result.lat, lon=result.lon)
        print_point("Intermediate point", result)


@app.command("destination")
def destination_command(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Start point 'lat,lon'", show_default=False)],
    distance: Annotated[float, typer.Option("--distance", "-d", help="Angular distance in degrees")],
    heading: Annotated[float, typer.Option("--bearing", "-b", help="Initial bearing in degrees")],
) -> None:
    """Point reached from START after DISTANCE along BEARING."""
    state: CliState = ctx.obj
    with _handle_errors(state, "destination"):
        result = destination_point(parse_point(start), distance, heading)
        state.log.log_operation("destination", lat=result.lat, lon=result.lon)
        print_point("Destination", result)


@app.command("crossing")
def crossing_command(
    ctx: typer.Context,
    start1: Annotated[str, typer.Argument(help="First line's point 'lat,lon'", show_default=False)],
    bearing1: Annotated[float, typer.Argument(help="First line's bearing", show_default=False)],
    start2: Annotated[str, typer.Argument(help="Second line's point 'lat,lon'", show_default=False)],
    bearing2: Annotated[float, typer.Argument(help="Second line's bearing", show_default=False)],
    tolerance: ToleranceOption = TOLERANCE_DEG,
    epsilon: EpsilonOption = DEGENERACY_EPSILON,
) -> None:
    """Intersection of two great circles given by point and bearing."""
    state: CliState = ctx.obj
    with _handle_errors(state, "crossing"):
        geometry = _geometry(tolerance, epsilon)
        result = intersection_point(
            parse_point(start1),
            parse_point(start2),
            bearing1,
            bearing2,
            geometry.tolerance_deg,
            geometry.degeneracy_epsilon,
        )
        state.log.log_operation("crossing", kind=result.kind.name)
        print_intersection(result)


@app.command("intersect")
def intersect_command(
    ctx: typer.Context,
    path1: Annotated[str, typer.Argument(help="First path", show_default=False)],
    path2: Annotated[str, typer.Argument(help="Second path", show_default=False)],
    polygon1: Annotated[
        bool,
        typer.Option("--polygon1", help="Treat the first path as a polygon boundary"),
    ] = False,
    polygon2: Annotated[
        bool,
        typer.Option("--polygon2", help="Treat the second path as a polygon boundary"),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Search with parallel worker processes (default: sequential)",
            min=1,
        ),
    ] = None,
    tolerance: ToleranceOption = TOLERANCE_DEG,
    epsilon: EpsilonOption = DEGENERACY_EPSILON,
) -> None:
    """Intersection points of two paths or polygon boundaries, in PATH1 order."""
    state: CliState = ctx.obj
    with _handle_errors(state, "intersect"):
        state.settings = state.settings.model_copy(
            update={
                "geometry": _geometry(tolerance, epsilon),
                "search": SearchConfig(parallel=workers is not None, max_workers=workers),
            }
        )
        geometry = state.settings.geometry
        points1, points2 = read_points(path1), read_points(path2)
        arcs1 = Polygon(points1).boundary() if polygon1 else Arcs(points1)
        arcs2 = Polygon(points2).boundary() if polygon2 else Arcs(points2)

        stats = SearchStats()
        state.log.log_search_start("intersect", arcs1.segment_count, arcs2.segment_count)
        if state.settings.search.parallel:
            points = parallel_intersection_points(
                arcs1,
                arcs2,
                max_workers=state.settings.search.max_workers,
                tolerance_deg=geometry.tolerance_deg,
                stats=stats,
                degeneracy_epsilon=geometry.degeneracy_epsilon,
            )
        else:
            points = intersection_points(
                arcs1, arcs2, geometry.tolerance_deg, stats, geometry.degeneracy_epsilon
            )
        state.log.log_search_complete("intersect", stats)
        print_intersections(points, stats, state.verbose)


@app.command("self-intersect")
def self_intersect_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path", show_default=False)],
    polygon: Annotated[
        bool,
        typer.Option("--polygon", help="Treat the path as a polygon boundary"),
    ] = False,
    tolerance: ToleranceOption = TOLERANCE_DEG,
    epsilon: EpsilonOption = DEGENERACY_EPSILON,
) -> None:
    """Points where a path or polygon boundary crosses itself."""
    state: CliState = ctx.obj
    with _handle_errors(state, "self-intersect"):
        geometry = _geometry(tolerance, epsilon)
        points = read_points(path)
        shape = Polygon(points) if polygon else Arcs(points)

        stats = SearchStats()
        boundary = shape.boundary() if polygon else shape
        state.log.log_search_start("self-intersect", boundary.segment_count, boundary.segment_count)
        found = self_intersection_points(
            shape, geometry.tolerance_deg, stats, geometry.degeneracy_epsilon
        )
        state.log.log_search_complete("self-intersect", stats)
        print_intersections(found, stats, state.verbose)


@app.command("locate")
def locate_command(
    ctx: typer.Context,
    point: Annotated[str, typer.Argument(help="Point 'lat,lon'", show_default=False)],
    path: Annotated[str, typer.Argument(help="Path", show_default=False)],
    polygon: Annotated[
        bool,
        typer.Option("--polygon", help="Treat the path as a polygon and test containment"),
    ] = False,
    tolerance: ToleranceOption = TOLERANCE_DEG,
    epsilon: EpsilonOption = DEGENERACY_EPSILON,
) -> None:
    """Distance from POINT to a path or polygon border, and where POINT lies."""
    state: CliState = ctx.obj
    with _handle_errors(state, "locate"):
        geometry = _geometry(tolerance, epsilon)
        target = parse_point(point)
        points = read_points(path)
        if polygon:
            shape = Polygon(points)
            distance = polygon_border_distance(target, shape)
            inside = is_point_in_polygon(
                target, shape, geometry.tolerance_deg, geometry.degeneracy_epsilon
            )
        else:
            distance = path_distance(target, Arcs(points))
            inside = None
        on_border = distance <= geometry.tolerance_deg
        state.log.log_operation("locate", distance=distance, on_border=on_border, inside=inside)
        print_location(distance, on_border, inside)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
