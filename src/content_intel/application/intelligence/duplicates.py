"""
DuplicateDetector - Near-duplicate clusters around an anchor item.

Algorithm:
    1. Seed a processed-id set with the anchor.
    2. For each unprocessed candidate whose overall similarity to the anchor
       exceeds the threshold (strictly), open a cluster [anchor, candidate].
    3. Scan every remaining unprocessed item and absorb it when it exceeds
       the threshold against the anchor OR that candidate. This is one-hop
       absorption, not full transitive closure.
    4. Emit clusters with at least two members and mark all members processed,
       so no item lands in two clusters within one run.

The primary item is picked by a recency + detail + tag-count score; the first
member wins ties.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from content_intel.domain.entities.item import as_utc
from content_intel.domain.entities.results import DuplicateCluster

from .similarity import SimilarityEngine, has_identical_title, has_identical_url

if TYPE_CHECKING:
    from collections.abc import Sequence

    from content_intel.domain.entities.item import ContentItem

logger = logging.getLogger(__name__)

DEFAULT_DUPLICATE_THRESHOLD = 0.8
NEARLY_IDENTICAL_THRESHOLD = 0.9

_SECONDS_PER_DAY = 86400.0


def primary_score(item: ContentItem, now: datetime) -> float:
    """
    Score used to pick a cluster's canonical item.

    recency  max(0, 10 - days_since_created / 10)
    detail   min(10, len(description) / 100)
    tags     min(5, tag_count)
    """
    days_since_created = (as_utc(now) - item.created_at).total_seconds() / _SECONDS_PER_DAY
    recency = max(0.0, 10 - days_since_created / 10)
    detail = min(10.0, len(item.description) / 100)
    tags = min(5, len(item.tags))
    return recency + detail + tags


def cluster_reason(anchor: ContentItem, candidate: ContentItem, similarity: float) -> str:
    if has_identical_title(anchor, candidate):
        return "Identical titles"
    if has_identical_url(anchor, candidate):
        return "Same URL"
    if similarity > NEARLY_IDENTICAL_THRESHOLD:
        return "Nearly identical content"
    return "Very similar content and tags"


class DuplicateDetector:
    """
    Partitions near-duplicates of an anchor item into clusters.

    Usage:
        detector = DuplicateDetector()
        clusters = detector.find_duplicates(anchor, items)
        for cluster in clusters:
            print(cluster.reason, cluster.primary_item.id, cluster.item_ids)
    """

    def __init__(
        self,
        similarity: SimilarityEngine | None = None,
        threshold: float = DEFAULT_DUPLICATE_THRESHOLD,
    ) -> None:
        self._similarity = similarity or SimilarityEngine()
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def find_duplicates(
        self,
        anchor: ContentItem,
        items: Sequence[ContentItem],
        now: datetime | None = None,
    ) -> list[DuplicateCluster]:
        """
        Find duplicate clusters seeded from ``anchor``.

        Args:
            anchor: Item the search is seeded from
            items: Collection to scan
            now: Reference instant for primary-item recency (default: current UTC time)

        Returns:
            Clusters in discovery order. No item id appears in two clusters.
        """
        now = as_utc(now)
        processed: set[str] = {anchor.id}
        clusters: list[DuplicateCluster] = []

        for candidate in items:
            if candidate.id in processed:
                continue

            similarity = self._similarity.overall(anchor, candidate)
            if similarity <= self._threshold:
                continue

            members = [anchor, candidate]
            for other in items:
                if other.id in processed or other.id == candidate.id:
                    continue
                absorbed = max(
                    self._similarity.overall(anchor, other),
                    self._similarity.overall(candidate, other),
                )
                if absorbed > self._threshold:
                    members.append(other)
                    processed.add(other.id)

            processed.update(member.id for member in members)
            clusters.append(
                DuplicateCluster(
                    id=f"cluster_{anchor.id}_{len(clusters) + 1}",
                    items=tuple(members),
                    similarity_score=similarity,
                    reason=cluster_reason(anchor, candidate, similarity),
                    primary_item=self._select_primary(members, now),
                )
            )

        logger.debug("Anchor %s: %d duplicate clusters", anchor.id, len(clusters))
        return clusters

    @staticmethod
    def _select_primary(members: list[ContentItem], now: datetime) -> ContentItem:
        best = members[0]
        best_score = primary_score(best, now)
        for member in members[1:]:
            score = primary_score(member, now)
            if score > best_score:
                best, best_score = member, score
        return best
