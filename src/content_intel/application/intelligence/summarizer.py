"""
Summarizer - Heuristic extractive summaries.

Sentences are split from ``title + description`` on ``.``, ``!`` and ``?``;
fragments of 10 characters or fewer are discarded. Every output sentence
appears verbatim (stripped) in the source text.

Length modes:
    short    first sentence            key points 3   actionable 0
    medium   first 3 sentences         key points 5   actionable 3
    long     first 6 sentences         key points 8   actionable 5
    bullets  top 5 as a bulleted list  key points 6   actionable 4

Confidence = min(0.95, 0.6 + words / 1000 * 0.3), rising with input length.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from content_intel.domain.entities.query import coerce_enum
from content_intel.domain.entities.results import SummaryFocus, SummaryLength, SummaryResult

if TYPE_CHECKING:
    from content_intel.domain.entities.item import ContentItem

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_MIN_SENTENCE_LENGTH = 10  # fragments must be longer than this

ACTION_CUES = ("should", "must", "need to", "important to", "consider", "implement", "use", "try")

BULLET = "•"

MAX_CONFIDENCE = 0.95
BASE_CONFIDENCE = 0.6


@dataclass(frozen=True)
class _LengthProfile:
    summary_sentences: int
    key_points: int
    actionable_items: int


_PROFILES: dict[SummaryLength, _LengthProfile] = {
    SummaryLength.SHORT: _LengthProfile(summary_sentences=1, key_points=3, actionable_items=0),
    SummaryLength.MEDIUM: _LengthProfile(summary_sentences=3, key_points=5, actionable_items=3),
    SummaryLength.LONG: _LengthProfile(summary_sentences=6, key_points=8, actionable_items=5),
    SummaryLength.BULLETS: _LengthProfile(summary_sentences=5, key_points=6, actionable_items=4),
}


def split_sentences(text: str) -> list[str]:
    """Split on sentence punctuation and drop fragments of 10 characters or fewer."""
    fragments = (fragment.strip() for fragment in _SENTENCE_SPLIT.split(text))
    return [fragment for fragment in fragments if len(fragment) > _MIN_SENTENCE_LENGTH]


def is_actionable(sentence: str) -> bool:
    """A sentence is actionable when any cue occurs in it, including inside longer words."""
    lowered = sentence.lower()
    return any(cue in lowered for cue in ACTION_CUES)


def summary_confidence(word_count: int) -> float:
    """Saturating confidence from input length, never above 0.95."""
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + word_count / 1000 * 0.3)


class Summarizer:
    """
    Extracts summaries, key points and actionable statements from an item.

    Usage:
        summarizer = Summarizer()
        result = summarizer.summarize(item, "bullets")
        print(result.summary)
    """

    def summarize(
        self,
        item: ContentItem,
        length: SummaryLength | str = SummaryLength.MEDIUM,
        focus: SummaryFocus | str | None = None,
    ) -> SummaryResult:
        """
        Summarize one item.

        Args:
            item: Item to summarize
            length: short, medium, long or bullets
            focus: Optional hint (key-points, actionable, technical, overview);
                echoed on the result, extraction stays the same

        Raises:
            InvalidParameterError: If length or focus is not a known value.
        """
        mode = coerce_enum(SummaryLength, length, "length")
        focus_hint = coerce_enum(SummaryFocus, focus, "focus") if focus is not None else None
        profile = _PROFILES[mode]

        text = item.text
        sentences = split_sentences(text)
        input_words = len(text.split())

        if mode is SummaryLength.BULLETS:
            summary = "\n".join(f"{BULLET} {sentence}" for sentence in sentences[: profile.summary_sentences])
        else:
            summary = self._join(sentences[: profile.summary_sentences])

        actionable = [sentence for sentence in sentences if is_actionable(sentence)]

        result = SummaryResult(
            summary=summary,
            key_points=sentences[: profile.key_points],
            actionable_items=actionable[: profile.actionable_items],
            confidence=summary_confidence(input_words),
            word_count=len(summary.split()),
            length=mode,
            focus=focus_hint,
        )
        logger.debug(
            "Summarized item %s (%s): %d sentences, confidence=%.2f",
            item.id,
            mode.value,
            len(sentences),
            result.confidence,
        )
        return result

    @staticmethod
    def _join(sentences: list[str]) -> str:
        if not sentences:
            return ""
        return ". ".join(sentences) + "."
