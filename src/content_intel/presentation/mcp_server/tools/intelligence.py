"""
Intelligence Tools - Relationships, duplicates and summaries.

Tools:
- find_related_content: Ranked related-item links for one item
- find_duplicate_clusters: Near-duplicate clusters seeded from one item
- summarize_content: Extractive summary, key points and actionable items
- analyze_content: All of the above plus reading time and complexity
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from content_intel.client import find_item
from content_intel.core.exceptions import ContentIntelError

from ._common import ResponseFormatter, parse_item_json, parse_items_json

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from content_intel.container import ApplicationContainer

logger = logging.getLogger(__name__)


def register_intelligence_tools(mcp: FastMCP, container: ApplicationContainer):
    """Register relationship, duplicate and summary tools."""

    @mcp.tool()
    def find_related_content(item_id: str, items_json: str, limit: int | None = None) -> str:
        """
        Find items related to one item in a collection.

        Each other item is compared on shared tags, overlapping words,
        save time and website. Every signal that clears its threshold
        yields its own link, so one pair can appear more than once.

        Args:
            item_id: Id of the item to find relations for
            items_json: JSON array of items, including the item itself
            limit: Maximum links to return (default: the configured related_limit, 10)

        Returns:
            JSON with links sorted by descending relevance_score.
        """
        logger.info("Finding related content for %s", item_id)
        try:
            items = parse_items_json(items_json)
            item = find_item(item_id, items)
        except ContentIntelError as e:
            return ResponseFormatter.error(e, tool_name="find_related_content")

        links = container.relationship_linker().related_to(item, items, limit=limit)
        output = {
            "item_id": item.id,
            "count": len(links),
            "links": [link.to_dict() for link in links],
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    @mcp.tool()
    def find_duplicate_clusters(item_id: str, items_json: str) -> str:
        """
        Find near-duplicates of one item.

        Items above the duplicate threshold (0.8 by default) are grouped into
        clusters. Each cluster names a primary item: the most recent, most
        detailed and best tagged member.

        Args:
            item_id: Id of the anchor item
            items_json: JSON array of items, including the anchor

        Returns:
            JSON with the clusters found. No item appears in two clusters.
        """
        logger.info("Finding duplicates of %s", item_id)
        try:
            items = parse_items_json(items_json)
            anchor = find_item(item_id, items)
        except ContentIntelError as e:
            return ResponseFormatter.error(e, tool_name="find_duplicate_clusters")

        clusters = container.duplicate_detector().find_duplicates(anchor, items)
        output = {
            "item_id": anchor.id,
            "count": len(clusters),
            "clusters": [cluster.to_dict() for cluster in clusters],
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    @mcp.tool()
    def summarize_content(item_json: str, length: str = "medium", focus: str | None = None) -> str:
        """
        Summarize one item by extracting its sentences.

        Args:
            item_json: JSON object for one item
            length: short (1 sentence), medium (3), long (6) or bullets (5 as a list)
            focus: Optional hint: key-points, actionable, technical or overview

        Returns:
            JSON with summary, key_points, actionable_items, confidence and word_count.
        """
        try:
            item = parse_item_json(item_json)
            result = container.summarizer().summarize(item, length, focus)
        except ContentIntelError as e:
            return ResponseFormatter.error(
                e,
                example='summarize_content(item_json=\'{"id": "1", ...}\', length="short")',
                tool_name="summarize_content",
            )

        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    @mcp.tool()
    def analyze_content(item_id: str, items_json: str) -> str:
        """
        Full analysis of one item against its collection.

        Combines related content and duplicate clusters with summary quality,
        estimated reading time and text complexity.

        Args:
            item_id: Id of the item to analyze
            items_json: JSON array of items, including the item itself

        Returns:
            JSON analysis.
        """
        logger.info("Analyzing content %s", item_id)
        try:
            items = parse_items_json(items_json)
            item = find_item(item_id, items)
        except ContentIntelError as e:
            return ResponseFormatter.error(e, tool_name="analyze_content")

        analysis = container.content_analyzer().analyze(item, items)
        return json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False)
