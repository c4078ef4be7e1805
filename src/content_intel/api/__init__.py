"""
HTTP API for Content Intelligence.

Usage:
    from content_intel.api import create_api_server, run_api_server

    app = create_api_server()   # FastAPI app, e.g. for TestClient
    run_api_server(port=8765)   # blocking, uvicorn
"""

from __future__ import annotations

from .server import create_api_server, run_api_server

__all__ = ["create_api_server", "run_api_server"]
