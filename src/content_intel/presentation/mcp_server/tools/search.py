"""
Search Tools - Query understanding and ranked search over a collection.

Tools:
- analyze_query: Intent, keywords, timeframe and content type of a query
- search_content: Ranked, highlighted search over items supplied as JSON
- suggest_queries: Example queries built from the collection's tags
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from content_intel.application.search import suggested_queries
from content_intel.core.exceptions import ContentIntelError

from ._common import ITEMS_EXAMPLE, ResponseFormatter, parse_items_json

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from content_intel.container import ApplicationContainer

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 20


def register_search_tools(mcp: FastMCP, container: ApplicationContainer):
    """Register query analysis and search tools."""

    @mcp.tool()
    def analyze_query(query: str) -> str:
        """
        Analyze a free-text query before searching.

        Detects what the user is asking for: intent (search, question, filter,
        temporal, categorical), keywords, a timeframe such as "last week",
        a content type such as "videos", and a confidence score.

        Args:
            query: Free-text query, e.g. "react videos from last month"

        Returns:
            JSON descriptor with intent, keywords, timeframe, content_type,
            sentiment and confidence.
        """
        logger.info("Analyzing query: %r", query)
        descriptor = container.query_analyzer().analyze(query)
        return json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False)

    @mcp.tool()
    def search_content(query: str, items_json: str, limit: int = DEFAULT_SEARCH_LIMIT) -> str:
        """
        Search a collection of saved items with a natural-language query.

        Every item is scored 0-100 from keyword, timeframe, content-type and
        question signals, scaled by the query confidence. Items scoring 0 are
        left out. Matched keywords are wrapped in highlight markers.

        Args:
            query: Free-text query, e.g. "react hooks", "notes from yesterday"
            items_json: JSON array of items. Each item needs id, title and
                created_at; description, url, tags and content_type are optional.
            limit: Maximum results to return (default 20)

        Returns:
            JSON with the analyzed query, total matches and ranked results.
        """
        logger.info("Searching %r", query)
        try:
            items = parse_items_json(items_json)
        except ContentIntelError as e:
            return ResponseFormatter.error(
                e,
                example=f'search_content(query="react", items_json=\'{ITEMS_EXAMPLE}\')',
                tool_name="search_content",
            )

        engine = container.search_engine()
        descriptor = engine.analyzer.analyze(query)
        results = engine.search_with(descriptor, items)

        output = {
            "query": descriptor.to_dict(),
            "total_matches": len(results),
            "results": [result.to_dict() for result in results[: max(limit, 0)]],
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    @mcp.tool()
    def suggest_queries(items_json: str) -> str:
        """
        Suggest example queries for a collection.

        Combines a recency prompt, the five most frequent tags and generic
        fallbacks into at most 8 queries. An empty collection gets none.

        Args:
            items_json: JSON array of items (same shape as search_content)

        Returns:
            JSON with a "suggestions" list.
        """
        try:
            items = parse_items_json(items_json)
        except ContentIntelError as e:
            return ResponseFormatter.error(e, tool_name="suggest_queries")

        suggestions = suggested_queries(items)
        return json.dumps({"suggestions": suggestions}, indent=2, ensure_ascii=False)
