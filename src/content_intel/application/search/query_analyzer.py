"""
QueryAnalyzer - Natural-Language Query Interpretation

This module analyzes free-text queries over a saved-content collection to determine:
1. Query intent (search, question, filter, temporal, categorical)
2. Significant keywords
3. Timeframe and content-type constraints
4. Sentiment of the wording
5. Confidence in the analysis

Architecture Decision:
    QueryAnalyzer is stateless and uses fixed patterns and word lists.
    It never fails: a query with no recognizable structure yields a
    SEARCH-intent descriptor with no keywords and low confidence.

Example:
    >>> analyzer = QueryAnalyzer()
    >>> result = analyzer.analyze("react hooks last week")
    >>> result.intent
    QueryIntent.TEMPORAL
    >>> result.keywords
    ('react', 'hooks', 'last', 'week')
"""

from __future__ import annotations

import logging
import re

from content_intel.domain.entities.query import (
    ContentType,
    QueryDescriptor,
    QueryIntent,
    Sentiment,
    Timeframe,
)

logger = logging.getLogger(__name__)


class QueryAnalyzer:
    """
    Query analyzer for saved-content search.

    Usage:
        analyzer = QueryAnalyzer()
        result = analyzer.analyze("how do I use react hooks?")

        print(result.intent)      # QueryIntent.QUESTION
        print(result.keywords)    # ('use', 'react', 'hooks')

    Note:
        QueryAnalyzer is purely local and holds no state, so one instance
        can be shared by all callers.
    """

    QUESTION_WORDS = ("what", "how", "when", "where", "why", "which", "who")

    STOP_WORDS = frozenset(
        {
            "what",
            "how",
            "when",
            "where",
            "why",
            "which",
            "who",
            "the",
            "a",
            "an",
            "and",
            "or",
            "but",
            "in",
            "on",
            "at",
            "to",
            "for",
            "of",
            "with",
            "by",
            "show",
            "me",
            "find",
            "search",
            "get",
            "give",
            "tell",
            "about",
            "did",
            "i",
            "my",
            "have",
            "do",
            "does",
            "can",
            "could",
            "would",
            "should",
            "all",
        }
    )

    # Ordered: the first matching pattern wins
    TIMEFRAME_PATTERNS: tuple[tuple[Timeframe, re.Pattern[str]], ...] = (
        (Timeframe.TODAY, re.compile(r"\b(today|this\s+day)\b")),
        (Timeframe.YESTERDAY, re.compile(r"\b(yesterday|last\s+day)\b")),
        (Timeframe.WEEK, re.compile(r"\b(this\s+week|last\s+week|past\s+week)\b")),
        (Timeframe.MONTH, re.compile(r"\b(this\s+month|last\s+month|past\s+month)\b")),
        (Timeframe.YEAR, re.compile(r"\b(this\s+year|last\s+year|past\s+year)\b")),
        (Timeframe.RECENT, re.compile(r"\b(recent|recently|latest|new)\b")),
    )

    CONTENT_TYPE_PATTERNS: tuple[tuple[ContentType, re.Pattern[str]], ...] = (
        (ContentType.ARTICLE, re.compile(r"\b(article|blog|post|news)\b")),
        (ContentType.VIDEO, re.compile(r"\b(video|watch|youtube|tutorial)\b")),
        (ContentType.DOCUMENT, re.compile(r"\b(document|pdf|file|doc)\b")),
        (ContentType.IMAGE, re.compile(r"\b(image|photo|picture|screenshot)\b")),
        (ContentType.NOTE, re.compile(r"\b(note|notes|annotation)\b")),
    )

    FILTER_PHRASES = ("filter", "show only")

    POSITIVE_WORDS = frozenset({"good", "great", "excellent", "amazing", "helpful", "useful", "love", "like", "best"})
    NEGATIVE_WORDS = frozenset({"bad", "terrible", "awful", "hate", "dislike", "useless", "boring", "worst"})

    MAX_KEYWORDS = 10

    def analyze(self, query: str) -> QueryDescriptor:
        """
        Analyze a search query.

        Args:
            query: User's free-text query

        Returns:
            QueryDescriptor with analysis results
        """
        normalized = (query or "").lower().strip()

        is_question = self._detect_question(normalized)
        timeframe = self._detect_timeframe(normalized)
        content_type = self._detect_content_type(normalized)
        keywords = self._extract_keywords(normalized)
        intent = self._resolve_intent(normalized, is_question, timeframe, content_type)
        confidence = self._calculate_confidence(keywords, timeframe, content_type, intent)

        descriptor = QueryDescriptor(
            original_query=query or "",
            intent=intent,
            keywords=tuple(keywords),
            timeframe=timeframe,
            content_type=content_type,
            sentiment=self._detect_sentiment(query or ""),
            confidence=confidence,
        )
        logger.debug(
            "Analyzed query %r: intent=%s keywords=%d confidence=%.2f",
            query,
            intent.value,
            len(keywords),
            confidence,
        )
        return descriptor

    def _detect_question(self, query: str) -> bool:
        """Interrogative opening word or a question mark anywhere."""
        return query.startswith(self.QUESTION_WORDS) or "?" in query

    def _detect_timeframe(self, query: str) -> Timeframe | None:
        for timeframe, pattern in self.TIMEFRAME_PATTERNS:
            if pattern.search(query):
                return timeframe
        return None

    def _detect_content_type(self, query: str) -> ContentType | None:
        for content_type, pattern in self.CONTENT_TYPE_PATTERNS:
            if pattern.search(query):
                return content_type
        return None

    def _extract_keywords(self, query: str) -> list[str]:
        """Extract significant keywords, preserving query order."""
        words = re.sub(r"[^\w\s]", " ", query).split()
        keywords = [word for word in words if len(word) > 2 and word not in self.STOP_WORDS]
        return keywords[: self.MAX_KEYWORDS]

    def _resolve_intent(
        self,
        query: str,
        is_question: bool,
        timeframe: Timeframe | None,
        content_type: ContentType | None,
    ) -> QueryIntent:
        if is_question:
            return QueryIntent.QUESTION
        if timeframe:
            return QueryIntent.TEMPORAL
        if content_type:
            return QueryIntent.CATEGORICAL
        if any(phrase in query for phrase in self.FILTER_PHRASES):
            return QueryIntent.FILTER
        return QueryIntent.SEARCH

    def _detect_sentiment(self, query: str) -> Sentiment:
        words = query.lower().split()
        positive = sum(1 for word in words if word in self.POSITIVE_WORDS)
        negative = sum(1 for word in words if word in self.NEGATIVE_WORDS)

        if positive > negative:
            return Sentiment.POSITIVE
        if negative > positive:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def _calculate_confidence(
        self,
        keywords: list[str],
        timeframe: Timeframe | None,
        content_type: ContentType | None,
        intent: QueryIntent,
    ) -> float:
        """Calculate confidence in analysis (0-1)."""
        confidence = 0.0

        if keywords:
            confidence += 0.3
        if timeframe:
            confidence += 0.2
        if content_type:
            confidence += 0.2

        # Non-default intent is a strong signal; default intent still earns a floor
        confidence += 0.3 if intent is not QueryIntent.SEARCH else 0.1

        return round(min(confidence, 1.0), 2)


# Convenience function
def analyze_query(query: str) -> QueryDescriptor:
    """
    Analyze a search query (convenience function).

    Args:
        query: User's free-text query

    Returns:
        QueryDescriptor with analysis results
    """
    return QueryAnalyzer().analyze(query)
