"""
RelationshipLinker - Related-content edges for one item.

Each other item in the collection is compared independently on four signals.
Every signal that clears its threshold emits its own link, so one pair can
produce up to four links of different types. Links are never merged.

Thresholds (strict):
    tag-based   > 0.3
    semantic    > 0.4
    temporal    > 0.5
    url-domain  > 0.7
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from content_intel.domain.entities.results import LinkType, SimilarityLink

from .similarity import SimilarityEngine, common_tags

if TYPE_CHECKING:
    from collections.abc import Iterable

    from content_intel.domain.entities.item import ContentItem

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 10

TAG_LINK_THRESHOLD = 0.3
SEMANTIC_LINK_THRESHOLD = 0.4
TEMPORAL_LINK_THRESHOLD = 0.5
URL_LINK_THRESHOLD = 0.7

SEMANTIC_REASON = "Similar content and themes"
TEMPORAL_REASON = "Saved around the same time"
URL_REASON = "From the same website or domain"


class RelationshipLinker:
    """
    Produces ranked related-item links for one item.

    Usage:
        linker = RelationshipLinker()
        links = linker.related_to(item, items)  # top 10, descending score
    """

    def __init__(
        self,
        similarity: SimilarityEngine | None = None,
        limit: int = DEFAULT_RELATED_LIMIT,
    ) -> None:
        self._similarity = similarity or SimilarityEngine()
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def related_to(
        self,
        item: ContentItem,
        items: Iterable[ContentItem],
        limit: int | None = None,
    ) -> list[SimilarityLink]:
        """
        Find content related to ``item``.

        Args:
            item: Source item
            items: Collection to compare against (the source itself is skipped)
            limit: Maximum links to return (default: configured limit, 10)

        Returns:
            Links sorted by descending score. Ties keep discovery order.
        """
        limit = self._limit if limit is None else limit

        links: list[SimilarityLink] = []
        for other in items:
            if other.id == item.id:
                continue
            links.extend(self._links_between(item, other))

        ranked = sorted(links, key=lambda link: link.relevance_score, reverse=True)[:limit]
        logger.debug("Item %s: %d candidate links, returning %d", item.id, len(links), len(ranked))
        return ranked

    def _links_between(self, item: ContentItem, other: ContentItem) -> list[SimilarityLink]:
        scores = self._similarity.similarity(item, other)
        links: list[SimilarityLink] = []

        if scores.tag_score > TAG_LINK_THRESHOLD:
            shared = len(common_tags(item, other))
            links.append(self._link(item, other, scores.tag_score, f"Shares {shared} similar tags", LinkType.TAG_BASED))
        if scores.semantic_score > SEMANTIC_LINK_THRESHOLD:
            links.append(self._link(item, other, scores.semantic_score, SEMANTIC_REASON, LinkType.SEMANTIC))
        if scores.temporal_score > TEMPORAL_LINK_THRESHOLD:
            links.append(self._link(item, other, scores.temporal_score, TEMPORAL_REASON, LinkType.TEMPORAL))
        if scores.url_score > URL_LINK_THRESHOLD:
            links.append(self._link(item, other, scores.url_score, URL_REASON, LinkType.URL_DOMAIN))

        return links

    @staticmethod
    def _link(
        item: ContentItem,
        other: ContentItem,
        score: float,
        reason: str,
        link_type: LinkType,
    ) -> SimilarityLink:
        return SimilarityLink(
            source_id=item.id,
            target_id=other.id,
            relevance_score=score,
            reason=reason,
            link_type=link_type,
        )
