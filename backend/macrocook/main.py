"""Macrocook MCP Server - Entry point.

Runs the MCP server over stdio. Logs go to stderr; stdout carries the protocol.
"""

import logging
import os

from .shell.mcp_server import mcp, get_store


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """Run the server."""
    configure_logging()

    logger.info("Starting Macrocook MCP server (saved foods: %s)", get_store().path)

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
