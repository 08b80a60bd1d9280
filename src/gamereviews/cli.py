#!/usr/bin/env python3
"""
Main CLI entry point for the Game Reviews API server.
"""

import os
import sys

import click
import uvicorn

from gamereviews import __version__
from gamereviews.config import settings
from gamereviews.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gamereviews")
def cli() -> None:
    """Game Reviews CLI - serve the GraphQL API and inspect its dataset."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Game Reviews API server."""
    debug = log_level == "debug"
    configure_logging(debug=debug, level=log_level)

    # create_app() reconfigures logging from settings, in this process and in
    # reload workers, so the chosen level has to reach both
    settings.debug = settings.debug or debug
    settings.log_level = log_level.upper()
    os.environ["GAMEREVIEWS_DEBUG"] = "true" if settings.debug else "false"
    os.environ["GAMEREVIEWS_LOG_LEVEL"] = settings.log_level

    logger.info(
        "Starting Game Reviews API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "gamereviews.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--path",
    "dataset_path",
    default=settings.dataset_path,
    type=click.Path(dir_okay=False),
    help="Dataset JSON file (default: bundled fixture)",
)
def dataset(dataset_path: str | None) -> None:
    """Show dataset counts and report dangling review references."""
    from gamereviews.store import DatasetError, find_dangling_references, load_dataset

    configure_logging()

    try:
        store = load_dataset(dataset_path)
    except DatasetError as e:
        logger.error("Failed to load dataset", error=str(e))
        click.echo(f"✗ Error loading dataset: {e}", err=True)
        sys.exit(1)

    for name, count in store.counts().items():
        click.echo(f"  {name}: {count}")

    dangling = find_dangling_references(store)
    if not dangling:
        click.echo("✓ All review references resolve")
        return

    click.echo(f"✗ {len(dangling)} dangling reference(s):", err=True)
    for ref in dangling:
        click.echo(
            f"  review {ref['review_id']}: {ref['field']} -> {ref['missing_id']}", err=True
        )
    sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
