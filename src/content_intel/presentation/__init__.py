"""
Presentation layer: MCP server exposing the engines as tools.
"""

from __future__ import annotations
