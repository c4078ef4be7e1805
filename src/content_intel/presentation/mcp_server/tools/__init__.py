"""
Content Intelligence MCP Tools

Search (3):
- analyze_query, search_content, suggest_queries

Intelligence (4):
- find_related_content, find_duplicate_clusters, summarize_content, analyze_content

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, container)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .intelligence import register_intelligence_tools
from .search import register_search_tools

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from content_intel.container import ApplicationContainer

TOOL_NAMES = (
    "analyze_query",
    "search_content",
    "suggest_queries",
    "find_related_content",
    "find_duplicate_clusters",
    "summarize_content",
    "analyze_content",
)


def register_all_tools(mcp: FastMCP, container: ApplicationContainer) -> int:
    """Register every tool on ``mcp``; returns the number of tools."""
    register_search_tools(mcp, container)
    register_intelligence_tools(mcp, container)
    return len(TOOL_NAMES)


__all__ = [
    "TOOL_NAMES",
    "register_all_tools",
    "register_intelligence_tools",
    "register_search_tools",
]
