"""CLI interface for fparty.

Command-line tool for serving the site and restarting deployed instances.
"""

import logging
import sys
from pathlib import Path

import click

from fparty.config import Config

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover fparty.toml)",
)


@click.group()
def cli() -> None:
    """Fairytale Party static site."""


@cli.command()
@config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Page templates directory (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    templates_dir: Path | None,
    verbose: bool,
) -> None:
    """Start the web server."""
    from fparty.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        templates_dir=templates_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.site.templates_dir:
        click.echo(f"Templates directory: {config.site.templates_dir}")

    run_server(config)


@cli.command()
def routes() -> None:
    """List page routes."""
    from fparty.api.pages import NAMED_ROUTES, PAGE_RESOURCE_PATH

    for path, page in NAMED_ROUTES.items():
        click.echo(f"GET {path} -> {page.value}")
    click.echo(f"GET {PAGE_RESOURCE_PATH} -> {{id}}")


@cli.command()
@config_option
def restart(config_path: Path | None) -> None:
    """Touch the restart file so the app server reloads the site."""
    from fparty.deploy import touch_restart_file

    config = _load_config(config_path)
    path = touch_restart_file(config.deploy)
    click.echo(f"Touched {path}")


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Args:
        config_path: Explicit config path, or None to auto-discover

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If the configuration is invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
