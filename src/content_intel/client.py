"""
Content Intelligence Client - High-level wrapper over the analysis engines.

This module provides one entry point for every library operation. Items may
be passed as ContentItem instances or as plain dicts.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, Union

from .application.search import suggested_queries
from .container import ApplicationContainer, create_container
from .core.exceptions import InvalidParameterError, InvalidQueryError
from .domain.entities import ContentItem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .domain.entities import (
        ContentAnalysis,
        DuplicateCluster,
        QueryDescriptor,
        SearchResult,
        SimilarityLink,
        SummaryFocus,
        SummaryLength,
        SummaryResult,
    )

ItemLike = Union[ContentItem, Mapping[str, Any]]


def to_item(value: ItemLike) -> ContentItem:
    """Accept a ContentItem or its dict form."""
    if isinstance(value, ContentItem):
        return value
    if isinstance(value, Mapping):
        value = dict(value)
    return ContentItem.from_dict(value)


def to_items(values: Iterable[ItemLike]) -> list[ContentItem]:
    return [to_item(value) for value in values]


def check_query(query: Any) -> str:
    """
    Reject queries that are not text.

    Raises:
        InvalidQueryError: If ``query`` is not a string.
    """
    if not isinstance(query, str):
        raise InvalidQueryError(query, f"expected text, got {type(query).__name__}")
    return query


def find_item(item_id: Any, items: Iterable[ContentItem]) -> ContentItem:
    """
    Look up an item by id.

    Raises:
        InvalidParameterError: If no item has ``item_id``.
    """
    for item in items:
        if item.id == str(item_id):
            return item
    raise InvalidParameterError("item_id", item_id, "the id of an item in the collection")


class ContentIntelClient:
    """
    Client for search and content intelligence over a caller-owned collection.

    Example:
        >>> client = ContentIntelClient()
        >>> results = client.search("react hooks", items)
        >>> for r in results:
        ...     print(f"{r.relevance_score}: {r.item.title}")
    """

    def __init__(self, container: ApplicationContainer | None = None):
        """
        Initialize the client.

        Args:
            container: Configured DI container. Default: one built from default config.
        """
        self._container = container or create_container()

    @property
    def container(self) -> ApplicationContainer:
        return self._container

    def analyze_query(self, query: str) -> QueryDescriptor:
        return self._container.query_analyzer().analyze(check_query(query))

    def search(
        self,
        query: str,
        items: Iterable[ItemLike],
        now: datetime | None = None,
    ) -> list[SearchResult]:
        """Search items; results above zero relevance, best first."""
        return self._container.search_engine().search(check_query(query), to_items(items), now=now)

    def related_content(
        self,
        item: ItemLike,
        items: Iterable[ItemLike],
        limit: int | None = None,
    ) -> list[SimilarityLink]:
        """Top related links for ``item`` (10 by default), best first."""
        return self._container.relationship_linker().related_to(to_item(item), to_items(items), limit=limit)

    def duplicate_clusters(
        self,
        item: ItemLike,
        items: Iterable[ItemLike],
        now: datetime | None = None,
    ) -> list[DuplicateCluster]:
        return self._container.duplicate_detector().find_duplicates(to_item(item), to_items(items), now=now)

    def summarize(
        self,
        item: ItemLike,
        length: SummaryLength | str = "medium",
        focus: SummaryFocus | str | None = None,
    ) -> SummaryResult:
        return self._container.summarizer().summarize(to_item(item), length, focus)

    def suggested_queries(self, items: Iterable[ItemLike], now: datetime | None = None) -> list[str]:
        return suggested_queries(to_items(items), now=now)

    def analyze_content(
        self,
        item: ItemLike,
        items: Iterable[ItemLike],
        now: datetime | None = None,
    ) -> ContentAnalysis:
        return self._container.content_analyzer().analyze(to_item(item), to_items(items), now=now)


__all__ = ["ContentIntelClient", "ItemLike", "check_query", "find_item", "to_item", "to_items"]
