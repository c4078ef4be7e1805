"""
Tests for ContentIntelClient - the library entry point.
"""

from __future__ import annotations

import pytest

from content_intel import ContentIntelClient
from content_intel.client import check_query, find_item, to_item
from content_intel.container import create_container
from content_intel.core.exceptions import InvalidItemError, InvalidParameterError, InvalidQueryError
from content_intel.domain.entities import QueryIntent


@pytest.fixture
def client():
    return ContentIntelClient()


class TestHelpers:
    def test_to_item_passthrough(self, react_item):
        assert to_item(react_item) is react_item

    def test_to_item_from_dict(self, react_item):
        assert to_item(react_item.to_dict()) == react_item

    def test_to_item_rejects_other_values(self):
        with pytest.raises(InvalidItemError):
            to_item("react-1")

    def test_check_query(self):
        assert check_query("react") == "react"
        with pytest.raises(InvalidQueryError):
            check_query(None)

    def test_find_item(self, sample_collection):
        assert find_item("py-1", sample_collection).title == "Python Packaging Tutorial"

    def test_find_item_missing(self, sample_collection):
        with pytest.raises(InvalidParameterError, match="item_id"):
            find_item("nope", sample_collection)


class TestContentIntelClient:
    def test_default_container(self, client):
        assert client.container.relationship_linker().limit == 10

    def test_custom_container(self):
        container = create_container({"related_limit": 2})
        assert ContentIntelClient(container).container is container

    def test_analyze_query(self, client):
        assert client.analyze_query("links saved yesterday").intent is QueryIntent.TEMPORAL

    def test_analyze_query_rejects_non_text(self, client):
        with pytest.raises(InvalidQueryError):
            client.analyze_query(42)

    def test_search_accepts_dicts(self, client, sample_items_payload, now):
        results = client.search("react", sample_items_payload, now=now)
        assert [r.item.id for r in results] == ["react-1", "react-2"]

    def test_search_rejects_non_text(self, client, sample_collection):
        with pytest.raises(InvalidQueryError):
            client.search(["react"], sample_collection)

    def test_search_invalid_item(self, client):
        with pytest.raises(InvalidItemError):
            client.search("react", [{"id": "1", "title": "x"}])

    def test_related_content(self, client, react_item, sample_collection):
        links = client.related_content(react_item, sample_collection, limit=2)
        assert len(links) <= 2
        assert all(link.source_id == "react-1" for link in links)

    def test_duplicate_clusters(self, client, make_item, now):
        a = make_item(item_id="a", title="Same")
        b = make_item(item_id="b", title="Same")
        [cluster] = client.duplicate_clusters(a, [a.to_dict(), b.to_dict()], now=now)
        assert cluster.item_ids == ["a", "b"]

    def test_summarize(self, client, react_item):
        result = client.summarize(react_item, "short")
        assert result.summary == "React Hooks Guide A walkthrough of useState and useEffect with examples."

    def test_suggested_queries(self, client, sample_collection, now):
        assert client.suggested_queries(sample_collection, now=now)[0] == "What did I save recently?"

    def test_analyze_content(self, client, react_item, sample_collection, now):
        analysis = client.analyze_content(react_item, sample_collection, now=now)
        assert analysis.item.id == "react-1"

    def test_naive_now_accepted(self, client, make_item, sample_collection, naive_now):
        a = make_item(item_id="a", title="Same")
        b = make_item(item_id="b", title="Same")
        [cluster] = client.duplicate_clusters(a, [a, b], now=naive_now)
        assert cluster.primary_item.id == "a"
        assert client.suggested_queries(sample_collection, now=naive_now)[0] == "What did I save recently?"
        assert client.analyze_content(a, [a, b], now=naive_now).duplicate_clusters == [cluster]
