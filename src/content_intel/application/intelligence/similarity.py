"""
Pairwise Similarity Between Saved Items.

Four independent, symmetric signals, each in [0, 1]:

1. **Tag**: Jaccard index over lowercase tag names
2. **Semantic**: Jaccard index over lowercase words longer than 3 characters
   from title + description (lexical stand-in for embedding similarity)
3. **Temporal**: step function of the day gap between creation timestamps
4. **URL**: 1.0 same host, 0.8 same registrable root, else 0

The overall score blends semantic 0.5, tag 0.3 and URL 0.2, with two
overrides: identical titles (case-insensitive) give 0.95 and identical URLs
give 0.9.

Architecture:
    Used by RelationshipLinker and DuplicateDetector. A vector-embedding
    provider could replace the semantic signal behind the same interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from content_intel.domain.entities.results import SimilarityScores

if TYPE_CHECKING:
    from content_intel.domain.entities.item import ContentItem


# =============================================================================
# Constants
# =============================================================================

_MIN_SEMANTIC_WORD_LENGTH = 4  # words must be longer than 3 characters

SEMANTIC_WEIGHT = 0.5
TAG_WEIGHT = 0.3
URL_WEIGHT = 0.2

IDENTICAL_TITLE_SCORE = 0.95
IDENTICAL_URL_SCORE = 0.9

SAME_HOST_SCORE = 1.0
SAME_ROOT_DOMAIN_SCORE = 0.8

_SECONDS_PER_DAY = 86400.0

# (max day gap, score), checked in order
_TEMPORAL_STEPS: tuple[tuple[float, float], ...] = (
    (1.0, 0.9),
    (7.0, 0.7),
    (30.0, 0.5),
)
_TEMPORAL_FLOOR = 0.1


# =============================================================================
# Signals
# =============================================================================


def _jaccard_similarity(set_a: set[str], set_b: set[str]) -> float:
    """Jaccard similarity coefficient: |A ∩ B| / |A ∪ B|."""
    union = len(set_a | set_b)
    if union == 0:
        return 0.0
    return len(set_a & set_b) / union


def _tag_set(item: ContentItem) -> set[str]:
    return {name.lower() for name in item.tag_names}


def _word_set(item: ContentItem) -> set[str]:
    text = f"{item.title} {item.description}".lower()
    return {word for word in text.split() if len(word) >= _MIN_SEMANTIC_WORD_LENGTH}


def _hostname(url: str | None) -> str | None:
    """Hostname of an absolute URL, or None when it is missing or unparseable."""
    if not url:
        return None
    try:
        return urlsplit(url.strip()).hostname
    except ValueError:
        return None


def common_tags(a: ContentItem, b: ContentItem) -> list[str]:
    """Lowercase tag names shared by both items, in ``a``'s order."""
    other = _tag_set(b)
    return [name.lower() for name in a.tag_names if name.lower() in other]


def tag_similarity(a: ContentItem, b: ContentItem) -> float:
    return _jaccard_similarity(_tag_set(a), _tag_set(b))


def semantic_similarity(a: ContentItem, b: ContentItem) -> float:
    return _jaccard_similarity(_word_set(a), _word_set(b))


def temporal_similarity(a: ContentItem, b: ContentItem) -> float:
    """Closer creation times score higher."""
    days = abs((a.created_at - b.created_at).total_seconds()) / _SECONDS_PER_DAY
    for max_days, score in _TEMPORAL_STEPS:
        if days <= max_days:
            return score
    return _TEMPORAL_FLOOR


def url_similarity(a: ContentItem, b: ContentItem) -> float:
    """
    Host-level URL similarity. Never raises.

    Returns 0 when either URL is missing or has no parseable hostname.
    """
    host_a = _hostname(a.url)
    host_b = _hostname(b.url)
    if not host_a or not host_b:
        return 0.0
    if host_a == host_b:
        return SAME_HOST_SCORE

    # Root domain = last two labels
    root_a = ".".join(host_a.split(".")[-2:])
    root_b = ".".join(host_b.split(".")[-2:])
    return SAME_ROOT_DOMAIN_SCORE if root_a == root_b else 0.0


def has_identical_title(a: ContentItem, b: ContentItem) -> bool:
    return a.title.lower() == b.title.lower()


def has_identical_url(a: ContentItem, b: ContentItem) -> bool:
    return bool(a.url and b.url and a.url == b.url)


# =============================================================================
# SimilarityEngine
# =============================================================================


class SimilarityEngine:
    """
    Computes pairwise similarity between two items.

    Every signal is symmetric, so ``similarity(a, b) == similarity(b, a)``.

    Usage:
        engine = SimilarityEngine()
        scores = engine.similarity(item_a, item_b)
        scores.overall  # used for duplicate clustering
    """

    def similarity(self, a: ContentItem, b: ContentItem) -> SimilarityScores:
        """Compute all four signals and the overall blend."""
        tag_score = tag_similarity(a, b)
        semantic_score = semantic_similarity(a, b)
        url_score = url_similarity(a, b)
        return SimilarityScores(
            tag_score=tag_score,
            semantic_score=semantic_score,
            temporal_score=temporal_similarity(a, b),
            url_score=url_score,
            overall=self._blend(a, b, tag_score, semantic_score, url_score),
        )

    def overall(self, a: ContentItem, b: ContentItem) -> float:
        """Overall similarity only (skips the temporal signal)."""
        return self._blend(a, b, tag_similarity(a, b), semantic_similarity(a, b), url_similarity(a, b))

    @staticmethod
    def _blend(
        a: ContentItem,
        b: ContentItem,
        tag_score: float,
        semantic_score: float,
        url_score: float,
    ) -> float:
        if has_identical_title(a, b):
            return IDENTICAL_TITLE_SCORE
        if has_identical_url(a, b):
            return IDENTICAL_URL_SCORE
        return semantic_score * SEMANTIC_WEIGHT + tag_score * TAG_WEIGHT + url_score * URL_WEIGHT
