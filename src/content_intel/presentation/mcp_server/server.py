"""
Content Intelligence MCP Server

A Model Context Protocol server exposing search, relationship, duplicate
and summary analysis over caller-supplied collections.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tools/: Tool implementations by category
- container: DI container (dependency-injector) for the engines
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP

from content_intel.container import ApplicationContainer, config_from_env, create_container

from .instructions import SERVER_INSTRUCTIONS
from .tools import register_all_tools

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "content-intel"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def create_server(
    name: str = DEFAULT_SERVER_NAME,
    config: dict[str, Any] | None = None,
    json_response: bool = False,
    stateless_http: bool = False,
) -> FastMCP:
    """
    Create and configure the Content Intelligence MCP server.

    Args:
        name: Server name.
        config: Container configuration overriding the defaults
            (related_limit, duplicate_threshold, highlight_open, highlight_close).
        json_response: Use JSON responses instead of SSE for HTTP transports.
        stateless_http: Use stateless HTTP mode.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing Content Intelligence MCP Server...")

    _container = create_container(config)

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        json_response=json_response,
        stateless_http=stateless_http,
    )

    count = register_all_tools(mcp, _container)
    logger.info("Registered %d tools", count)

    return mcp


def main():
    """Run the MCP server over stdio."""

    # stdout carries the protocol
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    server = create_server(config=config_from_env())
    server.run()


if __name__ == "__main__":
    main()
