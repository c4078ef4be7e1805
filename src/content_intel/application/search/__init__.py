"""
Natural-Language Search

Key Components:
- QueryAnalyzer: Turns free text into a QueryDescriptor
- RelevanceScorer: Bounded, explainable per-item relevance
- SearchEngine: Ranks a collection and highlights matches
- suggested_queries: Example queries from a collection's tag histogram
"""

from __future__ import annotations

from .engine import SearchEngine
from .query_analyzer import QueryAnalyzer, analyze_query
from .relevance import (
    DEFAULT_MATCH_REASON,
    RelevanceScore,
    RelevanceScorer,
    Signal,
    content_type_signal,
    highlight,
    is_within_timeframe,
    keyword_signal,
    question_signal,
    timeframe_signal,
)
from .suggestions import suggested_queries, top_tags

__all__ = [
    # Query Analysis
    "QueryAnalyzer",
    "analyze_query",
    # Relevance
    "RelevanceScorer",
    "RelevanceScore",
    "Signal",
    "keyword_signal",
    "timeframe_signal",
    "content_type_signal",
    "question_signal",
    "is_within_timeframe",
    "highlight",
    "DEFAULT_MATCH_REASON",
    # Search
    "SearchEngine",
    # Suggestions
    "suggested_queries",
    "top_tags",
]
