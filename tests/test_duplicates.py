"""
Tests for DuplicateDetector - clustering, reasons, primary selection.
"""

from __future__ import annotations

import pytest

from content_intel.application.intelligence import DuplicateDetector, primary_score


@pytest.fixture
def detector():
    return DuplicateDetector()


class TestDuplicateClusters:
    """Tests for cluster discovery."""

    def test_same_url_cluster(self, detector, make_item, now):
        a = make_item(item_id="a", title="First title", url="https://x.com/a")
        b = make_item(item_id="b", title="Another title", url="https://x.com/a")

        [cluster] = detector.find_duplicates(a, [a, b], now=now)

        assert cluster.item_ids == ["a", "b"]
        assert cluster.reason == "Same URL"
        assert cluster.similarity_score == 0.9
        assert cluster.id == "cluster_a_1"

    def test_identical_titles(self, detector, make_item, now):
        a = make_item(item_id="a", title="React Hooks Guide")
        b = make_item(item_id="b", title="react hooks guide")
        [cluster] = detector.find_duplicates(a, [a, b], now=now)
        assert cluster.reason == "Identical titles"
        assert cluster.similarity_score == 0.95

    def test_nearly_identical_content(self, detector, make_item, now):
        a = make_item(item_id="a", title="python packaging guide", tags=["python"], url="https://x.com/a")
        b = make_item(item_id="b", title="guide python packaging", tags=["python"], url="https://x.com/b")
        [cluster] = detector.find_duplicates(a, [a, b], now=now)
        assert cluster.reason == "Nearly identical content"

    def test_very_similar_content(self, detector, make_item, now):
        a = make_item(item_id="a", title="python packaging guide", tags=["python"], url="https://x.com/a")
        b = make_item(item_id="b", title="python packaging guide teams", tags=["python"], url="https://x.com/b")
        [cluster] = detector.find_duplicates(a, [a, b], now=now)
        assert cluster.reason == "Very similar content and tags"
        assert cluster.similarity_score == pytest.approx(0.875)

    def test_threshold_is_strict(self, make_item, now):
        """Same tags and words without a URL blend to exactly 0.8."""
        detector = DuplicateDetector()
        a = make_item(item_id="a", title="python packaging guide", tags=["python"])
        b = make_item(item_id="b", title="guide packaging python", tags=["python"])
        assert detector.find_duplicates(a, [a, b], now=now) == []

    def test_no_duplicates(self, detector, sample_collection, now):
        assert detector.find_duplicates(sample_collection[0], sample_collection, now=now) == []

    def test_empty_collection(self, detector, make_item, now):
        assert detector.find_duplicates(make_item(), [], now=now) == []

    def test_configurable_threshold(self, make_item, now):
        detector = DuplicateDetector(threshold=0.92)
        a = make_item(item_id="a", title="First", url="https://x.com/a")
        b = make_item(item_id="b", title="Second", url="https://x.com/a")
        assert detector.threshold == 0.92
        assert detector.find_duplicates(a, [a, b], now=now) == []


class TestClusterMembership:
    """Tests for one-hop absorption and the partition invariant."""

    @pytest.fixture
    def chain(self, make_item):
        # a~b by URL, b~c by title, c~d by URL; a is unrelated to c and d
        a = make_item(item_id="a", title="alpha", url="https://a.com/1")
        b = make_item(item_id="b", title="beta", url="https://a.com/1")
        c = make_item(item_id="c", title="beta", url="https://c.org/2")
        d = make_item(item_id="d", title="delta", url="https://c.org/2")
        return [a, b, c, d]

    def test_one_hop_absorption(self, detector, chain, now):
        """c joins through b, but d (two hops away) does not."""
        a = chain[0]
        [cluster] = detector.find_duplicates(a, chain, now=now)
        assert cluster.item_ids == ["a", "b", "c"]

    def test_no_item_in_two_clusters(self, detector, chain, now):
        for anchor in chain:
            clusters = detector.find_duplicates(anchor, chain, now=now)
            ids = [item_id for cluster in clusters for item_id in cluster.item_ids]
            assert len(ids) == len(set(ids))

    def test_anchor_not_listed_twice(self, detector, make_item, now):
        a = make_item(item_id="a", title="Same", url="https://x.com/a")
        b = make_item(item_id="b", title="Same", url="https://x.com/a")
        [cluster] = detector.find_duplicates(a, [b, a], now=now)
        assert cluster.item_ids == ["a", "b"]


class TestPrimaryItem:
    """Tests for primary-item selection."""

    def test_primary_score_components(self, make_item, now):
        item = make_item(description="x" * 250, tags=["a", "b", "c"], days_ago=20)
        # recency 10 - 20/10 = 8, detail 2.5, tags 3
        assert primary_score(item, now) == pytest.approx(13.5)

    def test_primary_score_caps(self, make_item, now):
        item = make_item(description="x" * 5000, tags=[str(i) for i in range(9)], days_ago=500)
        assert primary_score(item, now) == pytest.approx(0 + 10 + 5)

    def test_most_recent_wins(self, detector, make_item, now):
        old = make_item(item_id="old", title="Same", days_ago=50)
        new = make_item(item_id="new", title="Same", days_ago=0)
        [cluster] = detector.find_duplicates(old, [old, new], now=now)
        assert cluster.primary_item.id == "new"

    def test_naive_now_treated_as_utc(self, detector, make_item, now, naive_now):
        old = make_item(item_id="old", title="Same", days_ago=50)
        new = make_item(item_id="new", title="Same", days_ago=0)
        [cluster] = detector.find_duplicates(old, [old, new], now=naive_now)
        assert cluster.primary_item.id == "new"
        assert primary_score(new, naive_now) == primary_score(new, now)

    def test_more_detail_wins(self, detector, make_item, now):
        short = make_item(item_id="short", title="Same", description="tiny")
        long = make_item(item_id="long", title="Same", description="x" * 900, tags=["t"])
        [cluster] = detector.find_duplicates(short, [short, long], now=now)
        assert cluster.primary_item.id == "long"

    def test_tie_keeps_first_member(self, detector, make_item, now):
        a = make_item(item_id="a", title="Same")
        b = make_item(item_id="b", title="Same")
        [cluster] = detector.find_duplicates(a, [a, b], now=now)
        assert cluster.primary_item.id == "a"

    def test_to_dict(self, detector, make_item, now):
        a = make_item(item_id="a", title="Same")
        b = make_item(item_id="b", title="Same")
        data = detector.find_duplicates(a, [a, b], now=now)[0].to_dict()
        assert data["item_ids"] == ["a", "b"]
        assert data["primary_item_id"] == "a"
        assert data["reason"] == "Identical titles"
