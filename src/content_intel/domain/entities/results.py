"""
Result Entities - Derived views over a content collection.

All of these are created and discarded within a single engine call. They hold
references to caller-owned ContentItems and never outlive the invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .item import ContentItem


# =============================================================================
# Search
# =============================================================================


@dataclass(frozen=True)
class SearchResult:
    """One ranked search hit. relevance_score lies in (0, 100]."""

    item: ContentItem
    relevance_score: float
    match_reason: str
    highlighted_title: str
    highlighted_description: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "item": self.item.to_dict(),
            "relevance_score": round(self.relevance_score, 2),
            "match_reason": self.match_reason,
            "highlighted_title": self.highlighted_title,
            "highlighted_description": self.highlighted_description,
        }


# =============================================================================
# Similarity & Relationships
# =============================================================================


@dataclass(frozen=True)
class SimilarityScores:
    """Pairwise similarity along four signals plus the blended overall score, all in [0, 1]."""

    tag_score: float
    semantic_score: float
    temporal_score: float
    url_score: float
    overall: float

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "tag_score": round(self.tag_score, 4),
            "semantic_score": round(self.semantic_score, 4),
            "temporal_score": round(self.temporal_score, 4),
            "url_score": round(self.url_score, 4),
            "overall": round(self.overall, 4),
        }


class LinkType(Enum):
    """Signal that produced a relationship link."""

    SEMANTIC = "semantic"
    TEMPORAL = "temporal"
    TAG_BASED = "tag-based"
    URL_DOMAIN = "url-domain"


@dataclass(frozen=True)
class SimilarityLink:
    """
    A directed relationship edge from one item to another.

    Several links of different types may exist for the same pair.
    """

    source_id: str
    target_id: str
    relevance_score: float
    reason: str
    link_type: LinkType

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_id": self.source_id,
            "target_id": self.target_id,
            "relevance_score": round(self.relevance_score, 4),
            "reason": self.reason,
            "link_type": self.link_type.value,
        }


@dataclass(frozen=True)
class DuplicateCluster:
    """A group of two or more near-identical items with a designated primary item."""

    id: str
    items: tuple[ContentItem, ...]
    similarity_score: float
    reason: str
    primary_item: ContentItem

    @property
    def item_ids(self) -> list[str]:
        """Member ids in cluster order."""
        return [item.id for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "item_ids": self.item_ids,
            "items": [item.to_dict() for item in self.items],
            "similarity_score": round(self.similarity_score, 4),
            "reason": self.reason,
            "primary_item_id": self.primary_item.id,
        }


# =============================================================================
# Summaries
# =============================================================================


class SummaryLength(Enum):
    """Summary length modes."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    BULLETS = "bullets"


class SummaryFocus(Enum):
    """Optional focus hint accepted by the summarizer."""

    KEY_POINTS = "key-points"
    ACTIONABLE = "actionable"
    TECHNICAL = "technical"
    OVERVIEW = "overview"


@dataclass(frozen=True)
class SummaryResult:
    """Extractive summary of one item."""

    summary: str
    key_points: list[str] = field(default_factory=list)
    actionable_items: list[str] = field(default_factory=list)
    confidence: float = 0.6
    word_count: int = 0
    length: SummaryLength = SummaryLength.MEDIUM
    focus: SummaryFocus | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "summary": self.summary,
            "key_points": self.key_points,
            "actionable_items": self.actionable_items,
            "confidence": round(self.confidence, 4),
            "word_count": self.word_count,
            "length": self.length.value,
            "focus": self.focus.value if self.focus else None,
        }


# =============================================================================
# Content Analysis
# =============================================================================


class SummaryQuality(Enum):
    """How much text an item offers for summarization."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ContentComplexity(Enum):
    """Readability bucket from word and sentence length."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


@dataclass(frozen=True)
class ContentAnalysis:
    """Relationships, duplicates and quality metrics for one item."""

    item: ContentItem
    related_content: list[SimilarityLink]
    duplicate_clusters: list[DuplicateCluster]
    summary_quality: SummaryQuality
    reading_time: str
    complexity: ContentComplexity

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "item_id": self.item.id,
            "related_content": [link.to_dict() for link in self.related_content],
            "duplicate_clusters": [cluster.to_dict() for cluster in self.duplicate_clusters],
            "summary_quality": self.summary_quality.value,
            "reading_time": self.reading_time,
            "complexity": self.complexity.value,
        }
