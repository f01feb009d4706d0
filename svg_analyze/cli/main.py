"""Command-line entry point for svg-analyze."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from svg_analyze import __version__
from svg_analyze.cli.commands import analyze
from svg_analyze.config import Config
from svg_analyze.exceptions import ConfigError


def _configure_logging(level: str) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = logging.getLogger("svg_analyze")
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False


@click.group()
@click.version_option(__version__, prog_name="svg-analyze")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging verbosity (default from config, else WARNING)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """svg-analyze - check SVG content centering and padding."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    level = (log_level or config.log_level).upper()
    _configure_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(analyze)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
