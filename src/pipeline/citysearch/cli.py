"""Command-line interface for city proximity search."""

import json
import sys
from pathlib import Path

import click
import structlog

from citysearch.config import Config, get_config, reload_config
from citysearch.errors import CitySearchError, UnknownPointError
from citysearch.ingest import is_valid_city_name, load_registry
from citysearch.report import format_json, format_text
from citysearch.search.engine import ProximitySearchEngine
from citysearch.search.metrics import Metric, metric_help

# Configure structlog for CLI output
import logging

logging.basicConfig(format="%(message)s", level=logging.WARNING)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=True),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger()

EXIT_COMMAND = "0"


def _build_engine(ctx: click.Context) -> ProximitySearchEngine:
    """Load the configured dataset and wrap it in a search engine."""
    config: Config = ctx.obj["config"]
    data_file = ctx.obj.get("data_file") or config.dataset.path
    registry = load_registry(data_file)
    return ProximitySearchEngine(registry)


@click.group()
@click.option("--config-dir", type=click.Path(exists=True, path_type=Path), help="Configuration directory")
@click.option("--data-file", type=click.Path(path_type=Path), help="City dataset file (overrides configuration)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, data_file: Path | None, verbose: bool) -> None:
    """Find cities within a radius of a selected city."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["data_file"] = data_file

    config = reload_config(config_dir) if config_dir else get_config()
    ctx.obj["config"] = config

    logging.getLogger().setLevel(logging.DEBUG if verbose else config.logging.level)

    if verbose:
        click.echo("Configuration loaded", err=True)


@cli.command()
@click.argument("city")
@click.option("--radius", "-r", type=float, help="Search radius (default from configuration)")
@click.option("--metric", "-m", type=int, help=f"Distance metric: {metric_help()}")
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
@click.pass_context
def search(ctx: click.Context, city: str, radius: float | None, metric: int | None, as_json: bool) -> None:
    """Search for cities within a radius of CITY."""
    config: Config = ctx.obj["config"]
    if radius is None:
        radius = config.search.default_radius
    if metric is None:
        metric = config.search.default_metric

    try:
        engine = _build_engine(ctx)
        outcome = engine.query(city, radius, metric)
    except CitySearchError as e:
        logger.debug("Search failed", city=city, error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(format_json(outcome), indent=2))
    else:
        click.echo(format_text(outcome))


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Answer queries from an interactive prompt until '0' is entered."""
    try:
        engine = _build_engine(ctx)
    except CitySearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    while True:
        city = _prompt_city()
        if city == EXIT_COMMAND:
            break

        radius = click.prompt("Please enter the desired radius", type=float)
        metric = _prompt_metric()

        try:
            outcome = engine.query(city, radius, metric)
        except UnknownPointError as e:
            click.echo(f"Error: {e}", err=True)
            continue

        click.echo("")
        click.echo(format_text(outcome))
        click.echo("")

    click.echo("Bye")


def _prompt_city() -> str:
    city = click.prompt("Please enter the selected city name (0 to exit)", type=str)
    while city != EXIT_COMMAND and not is_valid_city_name(city):
        city = click.prompt("Invalid city name. Please enter the selected city name", type=str)
    return city


def _prompt_metric() -> Metric:
    text = f"Please enter the desired norm ({metric_help()})"
    code = click.prompt(text, type=int)
    while code not in {m.value for m in Metric}:
        code = click.prompt(f"Invalid norm. {text}", type=int)
    return Metric.from_code(code)


@cli.command()
@click.pass_context
def cities(ctx: click.Context) -> None:
    """List the cities in the dataset."""
    try:
        engine = _build_engine(ctx)
    except CitySearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    entries = engine.registry.all_entries()
    click.echo(f"{len(entries)} cities:")
    for name, coordinates in entries:
        click.echo(f"  {name}: ({coordinates.x}, {coordinates.y})")


if __name__ == "__main__":
    cli()
