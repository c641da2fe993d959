"""End-to-end tests for the command line interface."""

import json
import logging
from pathlib import Path

from typer.testing import CliRunner

from greatcircle import __version__
from greatcircle.cli.app import app
from greatcircle.utils import configure_logging

runner = CliRunner()


class TestSingleShotCommands:
    """Commands that compute one value or point."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_bearing(self) -> None:
        result = runner.invoke(app, ["bearing", "0,0", "0,10"])
        assert result.exit_code == 0
        assert "Bearing: 90.000000" in result.output

    def test_final_bearing(self) -> None:
        result = runner.invoke(app, ["bearing", "--final", "0,0", "0,10"])
        assert result.exit_code == 0
        assert "Final bearing: 90.000000" in result.output

    def test_distance_with_radius(self) -> None:
        result = runner.invoke(app, ["distance", "0,0", "0,90", "--radius", "1"])
        assert result.exit_code == 0
        assert "Angular distance: 90.000000" in result.output
        assert "Arc length: 1.570796" in result.output

    def test_midpoint(self) -> None:
        result = runner.invoke(app, ["midpoint", "0,0;0,10"])
        assert result.exit_code == 0
        assert "Midpoint: 0.000000, 5.000000" in result.output

    def test_intermediate_along_path(self) -> None:
        result = runner.invoke(app, ["intermediate", "0,0;0,10;0,20", "--fraction", "0.75"])
        assert result.exit_code == 0
        assert "Intermediate point: 0.000000, 15.000000" in result.output

    def test_destination(self) -> None:
        result = runner.invoke(app, ["destination", "0,0", "-d", "90", "-b", "90"])
        assert result.exit_code == 0
        assert "Destination: 0.000000, 90.000000" in result.output

    def test_crossing(self) -> None:
        result = runner.invoke(app, ["crossing", "0,0", "0", "0,10", "0"])
        assert result.exit_code == 0
        assert "Intersection: 90.000000" in result.output

    def test_crossing_coincident(self) -> None:
        result = runner.invoke(app, ["crossing", "0,0", "90", "0,10", "270"])
        assert result.exit_code == 0
        assert "Coincident" in result.output

    def test_crossing_degeneracy_epsilon(self) -> None:
        args = ["crossing", "0,0", "0", "0,1e-7", "0"]
        assert "Intersection: 90.000000" in runner.invoke(app, args).output
        result = runner.invoke(app, [*args, "--degeneracy-epsilon", "1e-8"])
        assert result.exit_code == 0
        assert "No intersection" in result.output

    def test_intermediate_antipodal(self) -> None:
        result = runner.invoke(app, ["intermediate", "0,0;0,180"])
        assert result.exit_code == 0
        assert "Intermediate point: 0.000000, 0.000000" in result.output


class TestLocateCommand:
    """Distance from a point to a path or polygon, and containment."""

    def test_point_on_path(self) -> None:
        result = runner.invoke(app, ["locate", "0,5", "0,0;0,10"])
        assert result.exit_code == 0
        assert "Distance: 0.000000" in result.output
        assert "On the path" in result.output
        assert "polygon" not in result.output

    def test_point_off_path(self) -> None:
        result = runner.invoke(app, ["locate", "3,5", "0,0;0,10"])
        assert result.exit_code == 0
        assert "Distance: 3.000000" in result.output
        assert "On the path" not in result.output

    def test_point_inside_polygon(self) -> None:
        result = runner.invoke(app, ["locate", "--polygon", "5,5", "0,0;0,10;10,10;10,0"])
        assert result.exit_code == 0
        assert "Inside the polygon" in result.output

    def test_point_outside_polygon(self) -> None:
        result = runner.invoke(app, ["locate", "--polygon", "15,5", "0,0;0,10;10,10;10,0"])
        assert result.exit_code == 0
        assert "Outside the polygon" in result.output

    def test_point_on_polygon_border(self) -> None:
        result = runner.invoke(app, ["locate", "--polygon", "0,5", "0,0;0,10;10,10;10,0"])
        assert result.exit_code == 0
        assert "On the border" in result.output
        assert "Inside the polygon" in result.output


class TestSearchCommands:
    """Commands that search paths for intersections."""

    def test_intersect(self) -> None:
        result = runner.invoke(app, ["intersect", "--", "0,0;0,10", "-5,5;5,5"])
        assert result.exit_code == 0
        assert "1 intersections" in result.output

    def test_intersect_with_one_worker(self) -> None:
        result = runner.invoke(app, ["intersect", "--workers", "1", "--", "0,0;0,10", "-5,5;5,5"])
        assert result.exit_code == 0
        assert "1 intersections" in result.output

    def test_intersect_verbose_shows_counters(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        try:
            result = runner.invoke(app, ["-v", "intersect", "--", "0,0;0,10", "-5,5;5,5"])
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
        assert result.exit_code == 0
        assert "1 segment pairs" in result.output

    def test_intersect_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "zigzag.json"
        path.write_text(json.dumps({"points": [[-5, 25], [5, 25], [-5, 5], [5, 5]]}))
        result = runner.invoke(app, ["intersect", "0,0;0,30", f"@{path}"])
        assert result.exit_code == 0
        assert "3 intersections" in result.output

    def test_polygon_intersect(self) -> None:
        result = runner.invoke(
            app, ["intersect", "--polygon2", "--", "-5,5;15,5", "0,0;0,10;10,10;10,0"]
        )
        assert result.exit_code == 0
        assert "2 intersections" in result.output

    def test_self_intersect_bowtie(self) -> None:
        result = runner.invoke(app, ["self-intersect", "0,0;10,10;0,10;10,0"])
        assert result.exit_code == 0
        assert "1 intersections" in result.output

    def test_self_intersect_square(self) -> None:
        result = runner.invoke(app, ["self-intersect", "--polygon", "0,0;0,10;10,10;10,0"])
        assert result.exit_code == 0
        assert "No intersections" in result.output


class TestErrors:
    """Invalid input exits with status 1 and a message."""

    def test_bad_point(self) -> None:
        result = runner.invoke(app, ["bearing", "abc", "0,10"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_latitude_out_of_range(self) -> None:
        result = runner.invoke(app, ["distance", "95,0", "0,0"])
        assert result.exit_code == 1

    def test_single_point_path(self) -> None:
        result = runner.invoke(app, ["midpoint", "0,0"])
        assert result.exit_code == 1

    def test_tolerance_too_large(self) -> None:
        result = runner.invoke(app, ["crossing", "0,0", "0", "0,10", "0", "--tolerance", "5"])
        assert result.exit_code == 1
        assert "Invalid setting" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["midpoint", f"@{tmp_path / 'missing.json'}"])
        assert result.exit_code == 1
        assert "not found" in result.output



class TestGlobalOptions:
    """Options given before the command."""

    def test_verbose_and_quiet_conflict(self) -> None:
        result = runner.invoke(app, ["-v", "-q", "bearing", "0,0", "0,10"])
        assert result.exit_code == 1
        assert "--verbose and --quiet" in result.output

    def test_log_level_applies_without_verbose(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        try:
            result = runner.invoke(app, ["--log-level", "INFO", "bearing", "0,0", "0,10"])
            added = [h for h in root.handlers if h not in before]
            assert [h.level for h in added] == [logging.INFO]
        finally:
            configure_logging(quiet=True)
        assert result.exit_code == 0

    def test_quiet_installs_no_console_handler(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        result = runner.invoke(app, ["-q", "bearing", "0,0", "0,10"])
        assert result.exit_code == 0
        assert [h for h in root.handlers if h not in before] == []
