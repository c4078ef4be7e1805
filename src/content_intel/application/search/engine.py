"""
SearchEngine - Ranked, explainable search over a saved-content collection.

Orchestrates QueryAnalyzer and RelevanceScorer across the caller's collection:

    Query text
        │
        ▼
    ┌──────────────────┐
    │  QueryAnalyzer   │  ← intent, keywords, timeframe, content type
    └────────┬─────────┘
             │
             ▼
    ┌──────────────────┐
    │ RelevanceScorer  │  ← per-item additive signals × confidence
    └────────┬─────────┘
             │
             ▼
    SearchResult[]  (score > 0, sorted descending, highlighted)

The engine keeps no index between calls; the collection is supplied per call.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from content_intel.domain.entities.item import as_utc
from content_intel.domain.entities.results import SearchResult

from .query_analyzer import QueryAnalyzer
from .relevance import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN, RelevanceScorer, highlight

if TYPE_CHECKING:
    from collections.abc import Iterable

    from content_intel.domain.entities.item import ContentItem
    from content_intel.domain.entities.query import QueryDescriptor

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Stateless search over caller-supplied items.

    Usage:
        engine = SearchEngine()
        results = engine.search("react hooks", items)
        for r in results:
            print(r.relevance_score, r.item.title, r.match_reason)
    """

    def __init__(
        self,
        analyzer: QueryAnalyzer | None = None,
        scorer: RelevanceScorer | None = None,
        highlight_open: str = HIGHLIGHT_OPEN,
        highlight_close: str = HIGHLIGHT_CLOSE,
    ) -> None:
        self._analyzer = analyzer or QueryAnalyzer()
        self._scorer = scorer or RelevanceScorer()
        self._highlight_open = highlight_open
        self._highlight_close = highlight_close

    @property
    def analyzer(self) -> QueryAnalyzer:
        return self._analyzer

    def search(
        self,
        query: str,
        items: Iterable[ContentItem],
        now: datetime | None = None,
    ) -> list[SearchResult]:
        """
        Search a collection with a free-text query.

        Args:
            query: Free-text query
            items: Collection to search
            now: Reference instant for timeframe windows (default: current UTC time)

        Returns:
            Results with relevance > 0, sorted by descending relevance.
            Ties keep collection order.
        """
        descriptor = self._analyzer.analyze(query)
        return self.search_with(descriptor, items, now=now)

    def search_with(
        self,
        descriptor: QueryDescriptor,
        items: Iterable[ContentItem],
        now: datetime | None = None,
    ) -> list[SearchResult]:
        """Search with an already analyzed query."""
        now = as_utc(now)

        results: list[SearchResult] = []
        scanned = 0
        for item in items:
            scanned += 1
            relevance = self._scorer.score(item, descriptor, now)
            if relevance.score <= 0:
                continue
            results.append(
                SearchResult(
                    item=item,
                    relevance_score=relevance.score,
                    match_reason=relevance.match_reason,
                    highlighted_title=self._highlight(item.title, descriptor),
                    highlighted_description=self._highlight(item.description, descriptor),
                )
            )

        # sorted() is stable, so equal scores keep collection order
        results = sorted(results, key=lambda r: r.relevance_score, reverse=True)
        logger.debug(
            "Search %r matched %d of %d items (intent=%s)",
            descriptor.original_query,
            len(results),
            scanned,
            descriptor.intent.value,
        )
        return results

    def _highlight(self, text: str, descriptor: QueryDescriptor) -> str:
        return highlight(text, descriptor.keywords, self._highlight_open, self._highlight_close)
