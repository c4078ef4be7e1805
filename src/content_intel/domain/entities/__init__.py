"""
Domain Entities

Core business objects for content search and analysis.
"""

from __future__ import annotations

from .item import ContentItem, Tag, as_utc, parse_timestamp
from .query import (
    ContentType,
    QueryDescriptor,
    QueryIntent,
    Sentiment,
    Timeframe,
    coerce_enum,
)
from .results import (
    ContentAnalysis,
    ContentComplexity,
    DuplicateCluster,
    LinkType,
    SearchResult,
    SimilarityLink,
    SimilarityScores,
    SummaryFocus,
    SummaryLength,
    SummaryQuality,
    SummaryResult,
)

__all__ = [
    # Item entities
    "ContentItem",
    "Tag",
    "parse_timestamp",
    "as_utc",
    # Query entities
    "QueryDescriptor",
    "QueryIntent",
    "Timeframe",
    "ContentType",
    "Sentiment",
    "coerce_enum",
    # Result entities
    "SearchResult",
    "SimilarityScores",
    "SimilarityLink",
    "LinkType",
    "DuplicateCluster",
    "SummaryResult",
    "SummaryLength",
    "SummaryFocus",
    "SummaryQuality",
    "ContentComplexity",
    "ContentAnalysis",
]
