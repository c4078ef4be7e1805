"""
Content Intelligence - Search and analysis for personal content collections

A standalone library that searches, links, deduplicates and summarizes a
caller-owned collection of saved items (articles, videos, notes, ...). It holds
no data and performs no I/O; every call is a pure function of its inputs.

Usage:
    from content_intel import ContentIntelClient

    client = ContentIntelClient()
    results = client.search("react hooks last week", items)

    for result in results:
        print(f"{result.relevance_score}: {result.highlighted_title}")

Features:
    - Query intent, timeframe and content-type detection
    - Signal-based relevance scoring with match reasons and highlighting
    - Tag, lexical, temporal and URL-domain similarity
    - Related-content links and near-duplicate clusters
    - Extractive summaries, key points and actionable items
    - Suggested queries from the collection's tags
"""

from __future__ import annotations

from .client import ContentIntelClient
from .core.exceptions import ContentIntelError
from .domain.entities import (
    ContentAnalysis,
    ContentItem,
    DuplicateCluster,
    QueryDescriptor,
    QueryIntent,
    SearchResult,
    SimilarityLink,
    SummaryResult,
    Tag,
)

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "ContentIntelClient",
    "ContentIntelError",
    # Entities
    "ContentItem",
    "Tag",
    "QueryDescriptor",
    "QueryIntent",
    "SearchResult",
    "SimilarityLink",
    "DuplicateCluster",
    "SummaryResult",
    "ContentAnalysis",
]
