"""
Relevance Scoring for Saved-Content Search.

Per-item relevance is additive across independent signals, each a pure
function of (item, query descriptor) returning a score delta plus the
human-readable reasons it fired:

1. **Keywords**: title +40, description +25, tag +30, URL +10 per keyword
2. **Timeframe**: +20 inside the window; -30 outside it for TEMPORAL intent
3. **Content type**: +15 when the item's classifier equals the requested type
4. **Question bonus**: +10 when the description is long enough to hold an answer

The running score is floored at 0 after every signal, multiplied by the
query confidence, then capped at 100.

Highlighting wraps keyword occurrences in markers. It skips text that is
already wrapped, so highlighting twice gives the same string as once.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from content_intel.domain.entities.item import as_utc
from content_intel.domain.entities.query import QueryIntent, Timeframe

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from content_intel.domain.entities.item import ContentItem
    from content_intel.domain.entities.query import QueryDescriptor

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

TITLE_MATCH_SCORE = 40.0
DESCRIPTION_MATCH_SCORE = 25.0
TAG_MATCH_SCORE = 30.0
URL_MATCH_SCORE = 10.0
TIMEFRAME_MATCH_SCORE = 20.0
TIMEFRAME_MISS_PENALTY = 30.0
CONTENT_TYPE_MATCH_SCORE = 15.0
QUESTION_BONUS_SCORE = 10.0
QUESTION_MIN_DESCRIPTION_LENGTH = 100
MAX_RELEVANCE_SCORE = 100.0

DEFAULT_MATCH_REASON = "General content match"

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"

# Rolling windows; TODAY and YESTERDAY use UTC calendar dates instead
_TIMEFRAME_WINDOWS: dict[Timeframe, timedelta] = {
    Timeframe.WEEK: timedelta(days=7),
    Timeframe.MONTH: timedelta(days=30),
    Timeframe.YEAR: timedelta(days=365),
    Timeframe.RECENT: timedelta(days=7),
}


# =============================================================================
# Signals
# =============================================================================


@dataclass(frozen=True)
class Signal:
    """Contribution of one scoring signal."""

    delta: float = 0.0
    reasons: tuple[str, ...] = ()


NO_SIGNAL = Signal()


def is_within_timeframe(created_at: datetime, timeframe: Timeframe, now: datetime) -> bool:
    """Check whether a timestamp falls inside the timeframe resolved against ``now``."""
    created = created_at.astimezone(timezone.utc)
    reference = as_utc(now)

    if timeframe is Timeframe.TODAY:
        return created.date() == reference.date()
    if timeframe is Timeframe.YESTERDAY:
        return created.date() == reference.date() - timedelta(days=1)
    return reference - created <= _TIMEFRAME_WINDOWS[timeframe]


def keyword_signal(item: ContentItem, descriptor: QueryDescriptor, now: datetime) -> Signal:
    """Title, description, tag and URL matches for every keyword."""
    if not descriptor.keywords:
        return NO_SIGNAL

    title = item.title.lower()
    description = item.description.lower()
    url = (item.url or "").lower()
    tag_names = [name.lower() for name in item.tag_names]

    delta = 0.0
    reasons: list[str] = []
    for keyword in descriptor.keywords:
        if keyword in title:
            delta += TITLE_MATCH_SCORE
            reasons.append(f'Title matches "{keyword}"')
        if keyword in description:
            delta += DESCRIPTION_MATCH_SCORE
            reasons.append(f'Description contains "{keyword}"')
        if any(keyword in name for name in tag_names):
            delta += TAG_MATCH_SCORE
            reasons.append(f'Tagged with "{keyword}"')
        if url and keyword in url:
            delta += URL_MATCH_SCORE
            reasons.append(f'URL contains "{keyword}"')

    return Signal(delta, tuple(reasons))


def timeframe_signal(item: ContentItem, descriptor: QueryDescriptor, now: datetime) -> Signal:
    """Reward items inside the window; penalize the rest when the query is temporal."""
    if descriptor.timeframe is None:
        return NO_SIGNAL

    if is_within_timeframe(item.created_at, descriptor.timeframe, now):
        return Signal(TIMEFRAME_MATCH_SCORE, (f"Saved {_describe_timeframe(descriptor.timeframe)}",))
    if descriptor.intent is QueryIntent.TEMPORAL:
        return Signal(-TIMEFRAME_MISS_PENALTY)
    return NO_SIGNAL


def content_type_signal(item: ContentItem, descriptor: QueryDescriptor, now: datetime) -> Signal:
    if descriptor.content_type is None or not item.content_type:
        return NO_SIGNAL
    if item.content_type.lower() == descriptor.content_type.value:
        return Signal(CONTENT_TYPE_MATCH_SCORE, (f"Content type: {descriptor.content_type.value}",))
    return NO_SIGNAL


def question_signal(item: ContentItem, descriptor: QueryDescriptor, now: datetime) -> Signal:
    """Long descriptions are more likely to answer a question."""
    if descriptor.intent is QueryIntent.QUESTION and len(item.description) > QUESTION_MIN_DESCRIPTION_LENGTH:
        return Signal(QUESTION_BONUS_SCORE)
    return NO_SIGNAL


def _describe_timeframe(timeframe: Timeframe) -> str:
    if timeframe is Timeframe.TODAY:
        return "today"
    if timeframe is Timeframe.YESTERDAY:
        return "yesterday"
    if timeframe is Timeframe.RECENT:
        return "recently"
    return f"this {timeframe.value}"


DEFAULT_SIGNALS: tuple[Callable[[ContentItem, QueryDescriptor, datetime], Signal], ...] = (
    keyword_signal,
    timeframe_signal,
    content_type_signal,
    question_signal,
)


# =============================================================================
# Scorer
# =============================================================================


@dataclass(frozen=True)
class RelevanceScore:
    """Bounded relevance score with its justification."""

    score: float
    match_reason: str


class RelevanceScorer:
    """
    Computes a bounded relevance score and justification for one item.

    Usage:
        scorer = RelevanceScorer()
        result = scorer.score(item, descriptor)
        result.score         # 0..100
        result.match_reason  # 'Title matches "react", Tagged with "react"'
    """

    def __init__(
        self,
        signals: tuple[Callable[[ContentItem, QueryDescriptor, datetime], Signal], ...] = DEFAULT_SIGNALS,
    ) -> None:
        self._signals = signals

    def score(
        self,
        item: ContentItem,
        descriptor: QueryDescriptor,
        now: datetime | None = None,
    ) -> RelevanceScore:
        """
        Score one item against an analyzed query.

        Args:
            item: Item to score
            descriptor: Analyzed query
            now: Reference instant for timeframe windows (default: current UTC time)

        Returns:
            RelevanceScore in [0, 100]
        """
        now = as_utc(now)

        running = 0.0
        reasons: list[str] = []
        for evaluate in self._signals:
            signal = evaluate(item, descriptor, now)
            running = max(0.0, running + signal.delta)
            reasons.extend(signal.reasons)

        final = min(MAX_RELEVANCE_SCORE, running * descriptor.confidence)
        reason = ", ".join(reasons) if reasons else DEFAULT_MATCH_REASON
        return RelevanceScore(score=final, match_reason=reason)


# =============================================================================
# Highlighting
# =============================================================================


def highlight(
    text: str,
    keywords: Iterable[str],
    open_tag: str = HIGHLIGHT_OPEN,
    close_tag: str = HIGHLIGHT_CLOSE,
) -> str:
    """
    Wrap every case-insensitive keyword occurrence in highlight markers.

    Segments already wrapped in markers are left untouched, so the operation
    is idempotent for the same keyword set.
    """
    terms = sorted({kw for kw in keywords if kw}, key=len, reverse=True)
    if not text or not terms:
        return text

    term_pattern = re.compile("|".join(re.escape(term) for term in terms), re.IGNORECASE)
    marked_pattern = re.compile(f"({re.escape(open_tag)}.*?{re.escape(close_tag)})", re.DOTALL)

    # re.split with a capture group puts already-marked segments at odd indices
    parts = marked_pattern.split(text)
    for index in range(0, len(parts), 2):
        parts[index] = term_pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", parts[index])
    return "".join(parts)
