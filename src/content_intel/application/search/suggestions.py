"""
Suggested Queries - Example queries derived from a collection.

Suggestions combine fixed templates with the collection's most frequent tag
names and a recency check. The output depends only on the tag histogram and
the creation timestamps; there is no randomness.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from content_intel.domain.entities.item import as_utc

if TYPE_CHECKING:
    from collections.abc import Sequence

    from content_intel.domain.entities.item import ContentItem

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 8
TOP_TAG_COUNT = 5
RECENT_WINDOW = timedelta(days=7)

RECENT_QUERY = "What did I save recently?"
TAG_TEMPLATE = "Show me everything about {tag}"
TAG_QUESTION_TEMPLATE = "What did I learn about {tag}?"
GENERIC_QUERIES = (
    "Show me articles from this month",
    "Find videos I saved this week",
    "Show only notes",
)


def top_tags(items: Sequence[ContentItem], limit: int = TOP_TAG_COUNT) -> list[str]:
    """
    Most frequent tag names (lowercased), most frequent first.

    Ties keep the order in which tags first appear in the collection.
    """
    histogram: Counter[str] = Counter()
    for item in items:
        for name in item.tag_names:
            histogram[name.lower()] += 1
    # most_common is stable for equal counts (insertion order)
    return [name for name, _ in histogram.most_common(limit)]


def suggested_queries(
    items: Sequence[ContentItem],
    now: datetime | None = None,
    limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    """
    Generate up to ``limit`` example queries for a collection.

    Order: recency prompt (when something was saved in the last 7 days),
    one query per top tag, a follow-up question for the top tag, then generic
    fallbacks. An empty collection yields no suggestions.
    """
    if not items:
        return []

    now = as_utc(now)
    tags = top_tags(items)

    candidates: list[str] = []
    if any(now - item.created_at <= RECENT_WINDOW for item in items):
        candidates.append(RECENT_QUERY)
    candidates.extend(TAG_TEMPLATE.format(tag=tag) for tag in tags)
    if tags:
        candidates.append(TAG_QUESTION_TEMPLATE.format(tag=tags[0]))
    candidates.extend(GENERIC_QUERIES)

    suggestions = list(dict.fromkeys(candidates))[:limit]
    logger.debug("Generated %d suggestions from %d tags", len(suggestions), len(tags))
    return suggestions
