"""
ContentAnalyzer - Relationships, duplicates and quality metrics for one item.

Bundles the RelationshipLinker and DuplicateDetector outputs with three
cheap text metrics:

- summary quality: how much text there is to summarize
- reading time: at 200 words per minute
- complexity: (avg word length - 4) + (avg sentence length - 15) / 5
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from typing import TYPE_CHECKING

from content_intel.domain.entities.item import as_utc
from content_intel.domain.entities.results import ContentAnalysis, ContentComplexity, SummaryQuality

from .duplicates import DuplicateDetector
from .relationships import RelationshipLinker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from content_intel.domain.entities.item import ContentItem

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
HIGH_QUALITY_MIN_CHARS = 500
MEDIUM_QUALITY_MIN_CHARS = 150


def assess_summary_quality(item: ContentItem) -> SummaryQuality:
    length = len(item.text)
    if length > HIGH_QUALITY_MIN_CHARS:
        return SummaryQuality.HIGH
    if length > MEDIUM_QUALITY_MIN_CHARS:
        return SummaryQuality.MEDIUM
    return SummaryQuality.LOW


def estimate_reading_time(item: ContentItem) -> str:
    minutes = math.ceil(len(item.text.split()) / WORDS_PER_MINUTE)
    if minutes < 1:
        return "< 1 minute"
    if minutes == 1:
        return "1 minute"
    return f"{minutes} minutes"


def assess_complexity(item: ContentItem) -> ContentComplexity:
    words = item.text.split()
    if not words:
        return ContentComplexity.SIMPLE

    avg_word_length = sum(len(word) for word in words) / len(words)
    sentence_count = len(re.split(r"[.!?]+", item.text))
    avg_sentence_length = len(words) / sentence_count

    score = (avg_word_length - 4) + (avg_sentence_length - 15) / 5
    if score > 3:
        return ContentComplexity.COMPLEX
    if score > 0:
        return ContentComplexity.MODERATE
    return ContentComplexity.SIMPLE


class ContentAnalyzer:
    """Full analysis of one item against its collection."""

    def __init__(
        self,
        linker: RelationshipLinker | None = None,
        detector: DuplicateDetector | None = None,
    ) -> None:
        self._linker = linker or RelationshipLinker()
        self._detector = detector or DuplicateDetector()

    def analyze(
        self,
        item: ContentItem,
        items: Sequence[ContentItem],
        now: datetime | None = None,
    ) -> ContentAnalysis:
        now = as_utc(now)
        analysis = ContentAnalysis(
            item=item,
            related_content=self._linker.related_to(item, items),
            duplicate_clusters=self._detector.find_duplicates(item, items, now=now),
            summary_quality=assess_summary_quality(item),
            reading_time=estimate_reading_time(item),
            complexity=assess_complexity(item),
        )
        logger.debug(
            "Analyzed item %s: %d links, %d clusters",
            item.id,
            len(analysis.related_content),
            len(analysis.duplicate_clusters),
        )
        return analysis
