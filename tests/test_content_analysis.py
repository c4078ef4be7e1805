"""
Tests for ContentAnalyzer and its text metrics.
"""

from __future__ import annotations

import pytest

from content_intel.application.intelligence import (
    ContentAnalyzer,
    RelationshipLinker,
    assess_complexity,
    assess_summary_quality,
    estimate_reading_time,
)
from content_intel.domain.entities import ContentComplexity, SummaryQuality


class TestSummaryQuality:
    """Tests for text-length buckets."""

    @pytest.mark.parametrize(
        ("length", "expected"),
        [
            (0, SummaryQuality.LOW),
            (150, SummaryQuality.LOW),
            (151, SummaryQuality.MEDIUM),
            (500, SummaryQuality.MEDIUM),
            (501, SummaryQuality.HIGH),
        ],
    )
    def test_thresholds(self, make_item, length, expected):
        assert assess_summary_quality(make_item(title="x" * length)) is expected


class TestReadingTime:
    """Tests for the 200 words-per-minute estimate."""

    def test_empty(self, make_item):
        assert estimate_reading_time(make_item(title="")) == "< 1 minute"

    def test_one_minute(self, make_item):
        assert estimate_reading_time(make_item(title=" ".join(["word"] * 150))) == "1 minute"

    def test_rounds_up(self, make_item):
        assert estimate_reading_time(make_item(title=" ".join(["word"] * 450))) == "3 minutes"


class TestComplexity:
    """Tests for the readability bucket."""

    def test_simple(self, make_item):
        assert assess_complexity(make_item(title="I am ok. We go.")) is ContentComplexity.SIMPLE

    def test_moderate(self, make_item):
        # avg word length 5, one 15-word sentence
        assert assess_complexity(make_item(title=" ".join(["alpha"] * 15))) is ContentComplexity.MODERATE

    def test_complex(self, make_item):
        assert assess_complexity(make_item(title=" ".join(["internationalization"] * 40))) is ContentComplexity.COMPLEX

    def test_empty_is_simple(self, make_item):
        assert assess_complexity(make_item(title="")) is ContentComplexity.SIMPLE


class TestContentAnalyzer:
    """Tests for the bundled analysis."""

    def test_bundle(self, react_item, sample_collection, now):
        analysis = ContentAnalyzer().analyze(react_item, sample_collection, now=now)

        assert analysis.item is react_item
        assert analysis.related_content == RelationshipLinker().related_to(react_item, sample_collection)
        assert analysis.duplicate_clusters == []
        assert analysis.summary_quality is SummaryQuality.LOW
        assert analysis.reading_time == "1 minute"

    def test_reports_duplicates(self, make_item, now):
        a = make_item(item_id="a", title="Same title")
        b = make_item(item_id="b", title="Same title")
        analysis = ContentAnalyzer().analyze(a, [a, b], now=now)
        assert [cluster.item_ids for cluster in analysis.duplicate_clusters] == [["a", "b"]]

    def test_naive_now_treated_as_utc(self, make_item, naive_now):
        a = make_item(item_id="a", title="Same title")
        b = make_item(item_id="b", title="Same title")
        analysis = ContentAnalyzer().analyze(a, [a, b], now=naive_now)
        assert [cluster.primary_item.id for cluster in analysis.duplicate_clusters] == ["a"]

    def test_to_dict(self, react_item, sample_collection, now):
        data = ContentAnalyzer().analyze(react_item, sample_collection, now=now).to_dict()
        assert data["item_id"] == "react-1"
        assert set(data) == {
            "item_id",
            "related_content",
            "duplicate_clusters",
            "summary_quality",
            "reading_time",
            "complexity",
        }
