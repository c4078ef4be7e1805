"""
Query Entities - Structured description of a free-text query.

QueryDescriptor is produced fresh for every query by the QueryAnalyzer and
discarded once the search call returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from content_intel.core.exceptions import InvalidParameterError

E = TypeVar("E", bound=Enum)


class QueryIntent(Enum):
    """
    Coarse classification of what a query is trying to accomplish.

    Resolved by priority: QUESTION > TEMPORAL > CATEGORICAL > FILTER > SEARCH.
    """

    SEARCH = "search"
    QUESTION = "question"
    FILTER = "filter"
    TEMPORAL = "temporal"
    CATEGORICAL = "categorical"


class Timeframe(Enum):
    """Time windows a query can refer to."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    RECENT = "recent"


class ContentType(Enum):
    """Content-type filters a query can request."""

    ARTICLE = "article"
    VIDEO = "video"
    DOCUMENT = "document"
    IMAGE = "image"
    NOTE = "note"


class Sentiment(Enum):
    """Tone of the query wording."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def coerce_enum(enum_type: type[E], value: Any, param_name: str) -> E:
    """
    Coerce a caller-supplied value (enum member or its string value) into an enum.

    Raises:
        InvalidParameterError: If the value is not one of the enum's values.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_type:
            if member.value == normalized:
                return member
    expected = "one of " + ", ".join(repr(m.value) for m in enum_type)
    raise InvalidParameterError(param_name, value, expected)


@dataclass(frozen=True)
class QueryDescriptor:
    """
    Result of query analysis.

    Invariants:
        - TEMPORAL intent always carries a timeframe
        - CATEGORICAL intent always carries a content type
        - confidence lies in [0, 1]
    """

    original_query: str
    intent: QueryIntent = QueryIntent.SEARCH
    keywords: tuple[str, ...] = field(default_factory=tuple)
    timeframe: Timeframe | None = None
    content_type: ContentType | None = None
    sentiment: Sentiment = Sentiment.NEUTRAL
    confidence: float = 0.1

    def __post_init__(self) -> None:
        if not isinstance(self.keywords, tuple):
            object.__setattr__(self, "keywords", tuple(self.keywords))
        if self.intent is QueryIntent.TEMPORAL and self.timeframe is None:
            raise InvalidParameterError("timeframe", None, "a timeframe for temporal intent")
        if self.intent is QueryIntent.CATEGORICAL and self.content_type is None:
            raise InvalidParameterError("content_type", None, "a content type for categorical intent")
        if not 0.0 <= self.confidence <= 1.0:
            raise InvalidParameterError("confidence", self.confidence, "a value between 0 and 1")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original_query": self.original_query,
            "intent": self.intent.value,
            "keywords": list(self.keywords),
            "timeframe": self.timeframe.value if self.timeframe else None,
            "content_type": self.content_type.value if self.content_type else None,
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
        }
