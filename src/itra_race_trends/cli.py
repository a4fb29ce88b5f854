"""Command-line interface for ITRA Race Trends."""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from .analysis.selection import RaceSelection
from .config import AppSettings
from .data_processing.loaders import load_race_data
from .data_processing.preprocessors import DataValidationError
from .visualization.charts import create_race_time_chart
from .visualization.dashboards import build_race_dashboard
from .visualization.plots import plot_race_times

STATIC_SUFFIXES = {".svg", ".png", ".pdf"}


def _load_or_fail(data_path: Optional[str]):
    try:
        return load_race_data(data_path)
    except (FileNotFoundError, DataValidationError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(package_name="itra-race-trends")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """ITRA Race Trends CLI.

    Chart how ultra-trail race winning times changed over the years,
    one race at a time.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    ctx.obj = AppSettings.from_env()


@main.command()
@click.argument("data_path", required=False)
@click.option("--race-index", default=0, help="Race group to draw (wraps around)")
@click.option("--output", default="./outputs/race_times.html", help="Output file (.html, .svg, .png, .pdf)")
@click.pass_obj
def render(settings: AppSettings, data_path: Optional[str], race_index: int, output: str) -> None:
    """Render one race group's chart to a file."""
    dataset = _load_or_fail(data_path or settings.data_path)
    selection = RaceSelection(dataset, race_index, settings.dimensions)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Rendering {selection.race_group_id} to {output_path}")

    if output_path.suffix.lower() in STATIC_SUFFIXES:
        plot_race_times(selection, settings.theme, save_path=output_path)
    else:
        fig = create_race_time_chart(selection, settings.theme)
        fig.write_html(str(output_path), include_plotlyjs="cdn")

    click.echo(f"{selection.event_name} - {selection.race_name} saved to: {output_path}")


@main.command()
@click.argument("data_path", required=False)
@click.option("--port", default=None, type=int, help="Port to run dashboard on")
@click.option("--host", default=None, help="Host to bind dashboard to")
@click.option("--debug", is_flag=True, help="Enable debug mode")
@click.pass_obj
def dashboard(
    settings: AppSettings,
    data_path: Optional[str],
    port: Optional[int],
    host: Optional[str],
    debug: bool,
) -> None:
    """Launch the interactive race trends page."""
    dataset = _load_or_fail(data_path or settings.data_path)
    host = host or settings.host
    port = port or settings.port

    app = build_race_dashboard(dataset, settings)
    logger.info(f"Starting dashboard on {host}:{port}")
    click.echo(f"Dashboard starting on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


@main.command("load-data")
@click.argument("data_path")
@click.option("--validate", is_flag=True, help="Check every race group can be charted")
@click.pass_obj
def load_data(settings: AppSettings, data_path: str, validate: bool) -> None:
    """Load race data and list its race groups."""
    dataset = _load_or_fail(data_path)
    counts = dataset.groupby("race_group_id", sort=False).size()
    click.echo(f"Loaded {len(dataset)} records in {len(counts)} race groups from: {data_path}")
    for race_group_id, count in counts.items():
        click.echo(f"  {race_group_id}: {count} years")

    if validate:
        click.echo("Validating race groups...")
        selection = RaceSelection(dataset, 0, settings.dimensions)
        for _ in selection.groups:
            create_race_time_chart(selection, settings.theme)
            selection.advance()
        click.echo("All race groups can be charted!")


if __name__ == "__main__":
    main()
