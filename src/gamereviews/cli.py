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
    """Game Reviews CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--seed-data",
    "seed_data_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file to load games, reviews and authors from",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    seed_data_path: str | None,
    log_level: str,
) -> None:
    """Start the Game Reviews API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Game Reviews API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads its settings at import time, so pass overrides through the environment
    if log_level == "debug":
        os.environ["GAMEREVIEWS_DEBUG"] = "true"
        os.environ["GAMEREVIEWS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("GAMEREVIEWS_DEBUG", "false")
        os.environ.setdefault("GAMEREVIEWS_LOG_LEVEL", log_level)
    if seed_data_path:
        os.environ["GAMEREVIEWS_SEED_DATA_PATH"] = seed_data_path
        settings.seed_data_path = seed_data_path

    try:
        if reload:
            uvicorn.run(
                "gamereviews.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from gamereviews.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
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
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from gamereviews.graphql.schema import print_schema_sdl

    try:
        sdl = print_schema_sdl()
    except Exception as e:
        logger.error("Failed to build GraphQL schema", error=str(e))
        click.echo(f"✗ Error building schema: {e}", err=True)
        sys.exit(1)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
