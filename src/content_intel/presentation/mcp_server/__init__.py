"""
Content Intelligence MCP Server

Usage as standalone server:
    python -m content_intel.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "content-intel": {
                "type": "stdio",
                "command": "content-intel-mcp"
            }
        }
    }

Usage for integration:
    from content_intel.presentation.mcp_server import create_server, register_all_tools

    # Option 1: Create standalone server
    server = create_server(config={"related_limit": 5})
    server.run()

    # Option 2: Register tools to existing server
    from content_intel.container import create_container
    register_all_tools(your_mcp_server, create_container())
"""

from __future__ import annotations

from .server import create_server, get_container, main
from .tools import register_all_tools

__all__ = ["create_server", "get_container", "main", "register_all_tools"]
