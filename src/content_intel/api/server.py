"""
HTTP API Server for Content Intelligence.

Exposes the same operations as the MCP server over plain HTTP so UIs and
other services can call the engines directly. Request bodies carry the
collection; the server keeps no state between calls.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from content_intel import __version__
from content_intel.application.search import suggested_queries
from content_intel.client import find_item, to_item, to_items
from content_intel.container import ApplicationContainer, config_from_env, create_container, read_env_value
from content_intel.core.exceptions import ContentIntelError
from content_intel.domain.entities import parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8765
ENV_API_HOST = "CONTENT_INTEL_API_HOST"
ENV_API_PORT = "CONTENT_INTEL_API_PORT"


# Pydantic models for API requests
class AnalyzeRequest(BaseModel):
    """Query to analyze."""
    query: str


class CollectionRequest(BaseModel):
    """A caller-owned collection, plus an optional reference time."""
    items: List[Dict[str, Any]] = Field(default_factory=list)
    now: Optional[datetime] = None


class SearchRequest(CollectionRequest):
    query: str
    limit: Optional[int] = Field(default=None, ge=0)


class ItemRequest(CollectionRequest):
    """Operations anchored on one item of the collection."""
    item_id: str


class RelatedRequest(ItemRequest):
    limit: Optional[int] = Field(default=None, ge=0)


class SummarizeRequest(BaseModel):
    item: Dict[str, Any]
    length: str = "medium"
    focus: Optional[str] = None


# Pydantic models for API responses
class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class SearchResponse(BaseModel):
    query: Dict[str, Any]
    total_matches: int
    results: List[Dict[str, Any]]


class SuggestionsResponse(BaseModel):
    suggestions: List[str]


def _reference_time(request: CollectionRequest) -> Optional[datetime]:
    if request.now is None:
        return None
    return parse_timestamp(request.now)


def create_api_server(container: Optional[ApplicationContainer] = None) -> FastAPI:
    """
    Create the FastAPI server.

    Args:
        container: Configured DI container. Default: one built from the environment.

    Returns:
        Configured FastAPI instance.
    """
    container = container or create_container(config_from_env())

    app = FastAPI(
        title="Content Intelligence API",
        description="Search, relationship, duplicate and summary analysis "
                    "over caller-supplied content collections.",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContentIntelError)
    async def content_intel_error_handler(request: Request, exc: ContentIntelError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content=exc.to_dict())

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post("/api/analyze")
    async def analyze(request: AnalyzeRequest):
        """Analyze a query: intent, keywords, timeframe, content type, confidence."""
        return container.query_analyzer().analyze(request.query).to_dict()

    @app.post("/api/search", response_model=SearchResponse)
    async def search(request: SearchRequest):
        """Ranked, highlighted search. Results scoring 0 are excluded."""
        engine = container.search_engine()
        descriptor = engine.analyzer.analyze(request.query)
        results = engine.search_with(descriptor, to_items(request.items), now=_reference_time(request))
        if request.limit is not None:
            shown = results[: request.limit]
        else:
            shown = results
        return SearchResponse(
            query=descriptor.to_dict(),
            total_matches=len(results),
            results=[result.to_dict() for result in shown],
        )

    @app.post("/api/related")
    async def related(request: RelatedRequest):
        """Related-item links for one item, best first."""
        items = to_items(request.items)
        item = find_item(request.item_id, items)
        links = container.relationship_linker().related_to(item, items, limit=request.limit)
        return {"item_id": item.id, "links": [link.to_dict() for link in links]}

    @app.post("/api/duplicates")
    async def duplicates(request: ItemRequest):
        """Near-duplicate clusters seeded from one item."""
        items = to_items(request.items)
        anchor = find_item(request.item_id, items)
        clusters = container.duplicate_detector().find_duplicates(anchor, items, now=_reference_time(request))
        return {"item_id": anchor.id, "clusters": [cluster.to_dict() for cluster in clusters]}

    @app.post("/api/summarize")
    async def summarize(request: SummarizeRequest):
        """Extractive summary of one item."""
        result = container.summarizer().summarize(to_item(request.item), request.length, request.focus)
        return result.to_dict()

    @app.post("/api/suggestions", response_model=SuggestionsResponse)
    async def suggestions(request: CollectionRequest):
        """Example queries for the collection."""
        items = to_items(request.items)
        return SuggestionsResponse(suggestions=suggested_queries(items, now=_reference_time(request)))

    @app.post("/api/analysis")
    async def analysis(request: ItemRequest):
        """Full analysis of one item against its collection."""
        items = to_items(request.items)
        item = find_item(request.item_id, items)
        return container.content_analyzer().analyze(item, items, now=_reference_time(request)).to_dict()

    return app


def run_api_server(host: Optional[str] = None, port: Optional[int] = None):
    """
    Run the HTTP API server.

    Args:
        host: Host to bind to (default: $CONTENT_INTEL_API_HOST or 127.0.0.1)
        port: Port to bind to (default: $CONTENT_INTEL_API_PORT or 8765)

    Raises:
        ConfigurationError: If an environment variable is malformed.
    """
    import uvicorn

    host = host or os.environ.get(ENV_API_HOST, "").strip() or DEFAULT_API_HOST
    if port is None:
        port = read_env_value(
            os.environ, ENV_API_PORT, int, lambda v: 0 < v < 65536, "a port number"
        ) or DEFAULT_API_PORT

    app = create_api_server()
    logger.info(f"Starting HTTP API server on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="info")


def main():
    """Run the HTTP API server."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    run_api_server()


if __name__ == "__main__":
    main()
