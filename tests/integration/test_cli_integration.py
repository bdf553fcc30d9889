"""Integration tests for CLI functionality."""

import json
import logging

import pytest
from click.testing import CliRunner

from orthopolyline import __version__
from orthopolyline.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by --verbose runs."""
    yield
    logger = logging.getLogger("orthopolyline")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ["orthogonalize", "inspect", "plot", "demo", "strategies"]:
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_strategies(self, runner):
        result = runner.invoke(main, ["strategies"])
        assert result.exit_code == 0
        assert "simplify_fit: Simplify and Fit (SimplifyFitOrthogonalizer)" in result.output
        assert "cluster_snap: Cluster Snap (ClusterSnapOrthogonalizer)" in result.output


class TestDemoCommand:
    def test_simplify_fit(self, runner):
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        assert "Strategy: Simplify and Fit" in result.output
        assert "Points reduced from 8 to 4" in result.output
        assert "Points reduced from 5 to 1" in result.output

    def test_cluster_snap(self, runner):
        result = runner.invoke(main, ["demo", "--strategy", "cluster_snap"])
        assert result.exit_code == 0
        assert "Strategy: Cluster Snap" in result.output
        assert "Points reduced from 8 to 4" in result.output
        assert "Points reduced from 5 to 3" in result.output


class TestOrthogonalizeCommand:
    def test_single_layer(self, runner, noisy_dxf_path, tmp_path):
        output = tmp_path / "out.dxf"
        result = runner.invoke(
            main,
            ["orthogonalize", str(noisy_dxf_path), str(output), "--layer", "OUTLINE"],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()
        assert "Processing polylines on layer: OUTLINE" in result.output
        assert "not processed" in result.output
        assert "Processed 1 polylines." in result.output
        assert "Done!" in result.output

    def test_all_layers(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            ["orthogonalize", str(noisy_dxf_path), str(tmp_path / "out.dxf"), "--all"],
        )
        assert result.exit_code == 0, result.output
        assert "Processing polylines on all layers..." in result.output
        assert "Processed 2 polylines." in result.output

    def test_no_layer_warning(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main, ["orthogonalize", str(noisy_dxf_path), str(tmp_path / "out.dxf")]
        )
        assert result.exit_code == 0, result.output
        assert "No layer specified" in result.output
        assert "Processed 2 polylines." in result.output

    def test_tolerances_and_strategy(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "-l",
                "outline",
                "--strategy",
                "cluster_snap",
                "--cluster-tol",
                "1.5",
                "-e",
                "2.5",
                "-s",
                "0.5",
                "-m",
                "1.0",
                "--max-depth",
                "50",
                "--verbose",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "8 -> 4 points" in result.output

    def test_include_open(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "--layer",
                "OUTLINE",
                "--include-open",
            ],
        )
        assert result.exit_code == 0, result.output
        assert result.output.count("not processed") == 2

    def test_json_report(self, runner, noisy_dxf_path, tmp_path):
        report = tmp_path / "reports" / "run.json"
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "--all",
                "--report",
                str(report),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Report saved to" in result.output
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["summary"]["polylines_processed"] == 2

    def test_csv_report(self, runner, noisy_dxf_path, tmp_path):
        report = tmp_path / "run.csv"
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "--all",
                "--report",
                str(report),
            ],
        )
        assert result.exit_code == 0, result.output
        assert report.read_text(encoding="utf-8").startswith("Handle,Layer")

    def test_unsupported_report_format(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "--all",
                "--report",
                str(tmp_path / "run.txt"),
            ],
        )
        assert result.exit_code == 1
        assert "Unsupported report format" in result.output

    def test_invalid_tolerance(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            ["orthogonalize", str(noisy_dxf_path), str(tmp_path / "out.dxf"), "-e", "0"],
        )
        assert result.exit_code == 2
        assert "must be positive" in result.output

    def test_unknown_strategy(self, runner, noisy_dxf_path, tmp_path):
        result = runner.invoke(
            main,
            [
                "orthogonalize",
                str(noisy_dxf_path),
                str(tmp_path / "out.dxf"),
                "--strategy",
                "hough",
            ],
        )
        assert result.exit_code == 2

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(
            main,
            ["orthogonalize", str(tmp_path / "none.dxf"), str(tmp_path / "out.dxf")],
        )
        assert result.exit_code == 2

    def test_empty_input(self, runner, tmp_path):
        empty = tmp_path / "empty.dxf"
        empty.touch()
        result = runner.invoke(
            main, ["orthogonalize", str(empty), str(tmp_path / "out.dxf")]
        )
        assert result.exit_code == 1
        assert "is empty" in result.output

    def test_unreadable_input(self, runner, tmp_path):
        bad = tmp_path / "bad.dxf"
        bad.write_text("this is not a drawing\n")
        result = runner.invoke(main, ["orthogonalize", str(bad), str(tmp_path / "out.dxf")])
        assert result.exit_code == 1
        assert "Failed to orthogonalize DXF file" in result.output


class TestInspectCommand:
    def test_summary(self, runner, noisy_dxf_path):
        result = runner.invoke(main, ["inspect", str(noisy_dxf_path)])
        assert result.exit_code == 0, result.output
        assert "Polylines: 4 (3 closed)" in result.output
        assert "OUTLINE: 2 closed, 1 open" in result.output
        assert "OTHER: 1 closed, 0 open" in result.output

    def test_verbose_lists_empty_layers(self, runner, noisy_dxf_path):
        result = runner.invoke(main, ["inspect", str(noisy_dxf_path), "-v"])
        assert result.exit_code == 0, result.output
        assert "0: 0 closed, 0 open" in result.output


class TestPlotCommand:
    def test_explicit_output(self, runner, noisy_dxf_path, tmp_path):
        image = tmp_path / "compare.png"
        result = runner.invoke(main, ["plot", str(noisy_dxf_path), "-o", str(image)])
        assert result.exit_code == 0, result.output
        assert image.exists()
        assert "Plot saved to" in result.output

    def test_default_output(self, runner, noisy_dxf_path):
        result = runner.invoke(main, ["plot", str(noisy_dxf_path), "--layer", "OUTLINE"])
        assert result.exit_code == 0, result.output
        assert (noisy_dxf_path.parent / "input_orthogonal.png").exists()

    def test_does_not_modify_input(self, runner, noisy_dxf_path, tmp_path):
        before = noisy_dxf_path.read_bytes()
        runner.invoke(main, ["plot", str(noisy_dxf_path), "-o", str(tmp_path / "p.png")])
        assert noisy_dxf_path.read_bytes() == before
