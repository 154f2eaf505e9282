#!/usr/bin/env python3
"""
Main CLI entry point for TubeTalk backend server.
"""

import os
import sys

import click
import uvicorn

from tubetalk import __version__
from tubetalk.config import settings
from tubetalk.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="tubetalk")
def cli() -> None:
    """TubeTalk CLI - run the API server."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the TubeTalk API server."""
    debug = log_level == "debug"
    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting TubeTalk API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reload subprocesses read these from the environment; this process
    # imports the app with the already loaded settings
    os.environ["TUBETALK_DEBUG"] = "true" if debug else "false"
    os.environ["TUBETALK_LOG_LEVEL"] = log_level
    settings.debug = debug
    settings.log_level = log_level

    try:
        uvicorn.run(
            "tubetalk.api.app:app",
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


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
