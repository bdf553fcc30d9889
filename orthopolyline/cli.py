"""Command-line interface for orthopolyline."""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import click

from . import __version__
from .config import DEFAULT_STRATEGY, DXF_TOOL_DEFAULTS, GEOMETRY_TOLERANCES
from .core.models import OrthogonalizeSettings, Point
from .core.pipeline import OrthogonalizationPipeline, PipelineResult
from .geometry import OrthogonalizerFactory
from .io import load_dxf
from .logging_config import setup_logging

# Sample outlines for the demo command
NOISY_RECTANGLE: List[Tuple[float, float]] = [
    (0.0, 0.1),
    (5.2, 0.3),
    (10.1, 0.2),
    (10.3, 5.1),
    (10.2, 10.0),
    (5.0, 10.2),
    (0.1, 10.1),
    (0.2, 5.0),
]
NOISY_L: List[Tuple[float, float]] = [
    (0.0, 0.0),
    (1.1, 0.2),
    (5.0, 0.1),
    (5.2, 3.1),
    (5.1, 7.0),
]


def tolerance_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the shared strategy and tolerance options to a command."""
    options = [
        click.option(
            "--strategy",
            type=click.Choice(OrthogonalizerFactory.get_available_strategies()),
            default=DEFAULT_STRATEGY,
            help="Orthogonalization strategy",
        ),
        click.option(
            "--eps",
            "-e",
            type=float,
            default=DXF_TOOL_DEFAULTS["eps"],
            help="Simplification tolerance",
        ),
        click.option(
            "--min-step",
            "-s",
            type=float,
            default=DXF_TOOL_DEFAULTS["min_step"],
            help="Minimum step distance",
        ),
        click.option(
            "--min-edge-len",
            "-m",
            type=float,
            default=DXF_TOOL_DEFAULTS["min_edge_length"],
            help="Minimum edge length after cleanup",
        ),
        click.option(
            "--cluster-tol",
            type=float,
            default=DXF_TOOL_DEFAULTS["cluster_tol"],
            help="Level grouping tolerance (cluster_snap)",
        ),
        click.option(
            "--max-depth",
            type=int,
            default=None,
            help="Maximum simplification depth (unbounded by default)",
        ),
        click.option("--layer", "-l", help="Process polylines on this layer only"),
        click.option(
            "--include-open", is_flag=True, help="Also process open polylines"
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_pipeline(
    strategy: str,
    eps: float,
    min_step: float,
    min_edge_len: float,
    cluster_tol: float,
    max_depth: Optional[int],
    include_open: bool,
) -> OrthogonalizationPipeline:
    try:
        settings = OrthogonalizeSettings(
            min_step=min_step,
            eps=eps,
            cluster_tol=cluster_tol,
            min_edge_length=min_edge_len,
            max_simplify_depth=max_depth,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    return OrthogonalizationPipeline(
        strategy=strategy, settings=settings, only_closed=not include_open
    )


def _check_input(input_file: str) -> None:
    if Path(input_file).stat().st_size == 0:
        raise click.ClickException(f"Input file '{input_file}' is empty")


def _write_report(result: PipelineResult, report: str) -> None:
    report_path = Path(report)
    report_path.parent.mkdir(parents=True, exist_ok=True)

    if report_path.suffix.lower() == ".json":
        from .reporting import generate_json_report

        generate_json_report(result, report_path)
    elif report_path.suffix.lower() == ".csv":
        from .reporting import generate_csv_report

        generate_csv_report(result, report_path)
    else:
        raise click.ClickException(
            f"Unsupported report format '{report_path.suffix}' (use .json or .csv)"
        )
    click.echo(f"✓ Report saved to: {report_path}")


@click.group()
@click.version_option(version=__version__, prog_name="orthopolyline")
def main() -> None:
    """orthopolyline - Straighten noisy outlines into axis-aligned polylines."""
    pass


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", type=click.Path(dir_okay=False))
@tolerance_options
@click.option(
    "--all", "-a", "all_layers", is_flag=True, help="Process polylines on all layers"
)
@click.option("--report", type=click.Path(dir_okay=False), help="JSON or CSV report")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def orthogonalize(
    input_file: str,
    output_file: str,
    strategy: str,
    eps: float,
    min_step: float,
    min_edge_len: float,
    cluster_tol: float,
    max_depth: Optional[int],
    layer: Optional[str],
    include_open: bool,
    all_layers: bool,
    report: Optional[str],
    verbose: bool,
) -> None:
    """Orthogonalize polylines in a DXF file."""
    if verbose:
        setup_logging(logging.DEBUG)

    _check_input(input_file)
    pipeline = _build_pipeline(
        strategy, eps, min_step, min_edge_len, cluster_tol, max_depth, include_open
    )

    if all_layers:
        layer = None
        click.echo("Processing polylines on all layers...")
    elif layer:
        click.echo(f"Processing polylines on layer: {layer}")
    else:
        click.echo(
            "Warning: No layer specified and --all not used. "
            "Use --layer LAYERNAME or --all"
        )
        click.echo("Processing all polylines anyway...")

    try:
        click.echo(f"Loading DXF file: {input_file}")
        result = pipeline.run(input_file, output_file, layer_name=layer)
    except ValueError as e:
        click.echo(f"✗ Orthogonalization failed: {e}")
        raise click.ClickException("Failed to orthogonalize DXF file")

    for warning in result.warnings:
        click.echo(f"  Warning: {warning}")

    click.echo(f"Processed {result.processed_count} polylines.")
    if verbose:
        for entity in result.entities:
            status = "✓" if entity.processed else "✗"
            line = (
                f"  {status} {entity.dxftype} {entity.handle} "
                f"({entity.layer}): {entity.message}"
            )
            if entity.validation is not None:
                line += f" [{entity.validation.get_summary()}]"
            click.echo(line)

    click.echo(f"Saved to: {output_file}")

    if report:
        _write_report(result, report)

    click.echo("Done!")


@main.command()
@click.argument("dxf_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def inspect(dxf_file: str, verbose: bool) -> None:
    """Show layers and polyline counts of a DXF file."""
    _check_input(dxf_file)
    try:
        reader = load_dxf(Path(dxf_file))
        summary = reader.get_summary()
    except ValueError as e:
        click.echo(f"✗ Import failed: {e}")
        raise click.ClickException("Failed to read DXF file")

    click.echo(f"✓ {summary['file_path']} ({summary['dxf_version']})")
    click.echo(f"  Layers: {len(summary['layers'])}")
    click.echo(
        f"  Polylines: {summary['total_polylines']} "
        f"({summary['closed_polylines']} closed)"
    )

    for layer, counts in summary["polylines_per_layer"].items():
        if verbose or counts["closed"] or counts["open"]:
            click.echo(f"    {layer}: {counts['closed']} closed, {counts['open']} open")


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@tolerance_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output image")
def plot(
    input_file: str,
    strategy: str,
    eps: float,
    min_step: float,
    min_edge_len: float,
    cluster_tol: float,
    max_depth: Optional[int],
    layer: Optional[str],
    include_open: bool,
    output: Optional[str],
) -> None:
    """Plot original and orthogonalized outlines without modifying the file."""
    from .visualization import plot_pipeline_result

    _check_input(input_file)
    pipeline = _build_pipeline(
        strategy, eps, min_step, min_edge_len, cluster_tol, max_depth, include_open
    )

    try:
        reader = load_dxf(Path(input_file))
        result = pipeline.process_document(reader.doc, layer, reader=reader)
    except ValueError as e:
        click.echo(f"✗ Plot failed: {e}")
        raise click.ClickException("Failed to plot DXF file")

    if not output:
        input_path = Path(input_file)
        output = str(input_path.with_name(f"{input_path.stem}_orthogonal.png"))

    image_path = plot_pipeline_result(result, Path(output), title=Path(input_file).name)
    click.echo(f"✓ Plot saved to: {image_path}")


@main.command()
@click.option(
    "--strategy",
    type=click.Choice(OrthogonalizerFactory.get_available_strategies()),
    default=DEFAULT_STRATEGY,
    help="Orthogonalization strategy",
)
def demo(strategy: str) -> None:
    """Run the built-in noisy rectangle and noisy L samples."""
    orthogonalizer = OrthogonalizerFactory.create(
        strategy, OrthogonalizeSettings.from_defaults(GEOMETRY_TOLERANCES)
    )
    click.echo(f"Strategy: {orthogonalizer.get_methodology_name()}")

    samples = [
        ("Noisy rectangle (closed)", NOISY_RECTANGLE, True),
        ("Noisy L (open)", NOISY_L, False),
    ]
    for title, coords, closed in samples:
        points = [Point.of(c) for c in coords]
        result = orthogonalizer.orthogonalize(points, closed)

        click.echo("")
        click.echo(title)
        click.echo("Input:")
        for p in points:
            click.echo(f"  ({p.x:.2f}, {p.y:.2f})")
        click.echo("Output:")
        for p in result:
            click.echo(f"  ({p.x:.2f}, {p.y:.2f})")
        click.echo(f"Points reduced from {len(points)} to {len(result)}")


@main.command()
def strategies() -> None:
    """List available orthogonalization strategies."""
    for code in OrthogonalizerFactory.get_available_strategies():
        info = OrthogonalizerFactory.get_strategy_info(code)
        click.echo(f"{info['code']}: {info['name']} ({info['class']})")


if __name__ == "__main__":
    main()
