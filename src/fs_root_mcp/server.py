"""Main FastMCP server — mounts the roots sub-server for one configured root."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from .config import ServerConfig
from .errors import ConfigurationError
from .tools.roots import build_roots_server

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app(config: ServerConfig) -> FastMCP:
    """Build the MCP app serving *config*'s root."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP):
        """Startup/shutdown hook."""
        yield {}
        logger.info("Lifespan shutdown: fs-root-mcp (root %s)", config.root_dir)

    app = FastMCP(
        "FileSystem MCP",
        instructions=(
            "Read-only browsing of a single configured root directory. "
            "Use list_roots to see the root and list_resources with a "
            "path relative to it to list entries."
        ),
        lifespan=_lifespan,
    )
    app.mount(build_roots_server(config))
    return app


def _configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the stdio transport."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    """Entry-point for ``fs-root-mcp`` console script."""
    try:
        config = ServerConfig.from_env()
    except (ConfigurationError, ValueError) as exc:
        _configure_logging("INFO")
        logger.critical("Invalid configuration: %s", exc)
        sys.exit(1)

    _configure_logging(config.log_level)
    logger.info("Starting FileSystem MCP server with root: %s", config.root_dir)
    try:
        create_app(config).run()
    except Exception:
        logger.critical("Server error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
