"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from content_intel.domain.entities import ContentItem, Tag

# Fixed reference instant for every time-dependent test
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


# ============================================================
# Item Fixtures
# ============================================================


@pytest.fixture
def now():
    """Fixed reference time (2024-06-15 12:00 UTC)."""
    return NOW


@pytest.fixture
def naive_now():
    """NOW without tzinfo, as returned by ``datetime.now()`` on a UTC host."""
    return NOW.replace(tzinfo=None)


@pytest.fixture
def make_item():
    """Factory for ContentItem with sensible defaults.

    ``days_ago`` is measured from NOW; ``tags`` are plain names.
    """

    def _make(
        item_id="1",
        title="Untitled",
        description="",
        url=None,
        tags=(),
        days_ago=0.0,
        content_type=None,
    ):
        return ContentItem(
            id=item_id,
            title=title,
            description=description,
            url=url,
            tags=tuple(Tag(name) for name in tags),
            created_at=NOW - timedelta(days=days_ago),
            content_type=content_type,
        )

    return _make


@pytest.fixture
def react_item(make_item):
    """Item used by the React search examples."""
    return make_item(
        item_id="react-1",
        title="React Hooks Guide",
        description="A walkthrough of useState and useEffect with examples.",
        url="https://react.dev/learn/hooks",
        tags=["react", "hooks"],
        days_ago=3,
        content_type="article",
    )


@pytest.fixture
def sample_collection(make_item, react_item):
    """Small mixed collection."""
    return [
        react_item,
        make_item(
            item_id="py-1",
            title="Python Packaging Tutorial",
            description="How to build and publish wheels with hatchling.",
            url="https://packaging.python.org/tutorials",
            tags=["python", "packaging"],
            days_ago=40,
            content_type="video",
        ),
        make_item(
            item_id="note-1",
            title="Meeting notes",
            description="Discussed the roadmap for the search feature.",
            tags=["work"],
            days_ago=1,
            content_type="note",
        ),
        make_item(
            item_id="react-2",
            title="Advanced React Patterns",
            description="Compound components, render props and custom hooks.",
            url="https://blog.example.com/react-patterns",
            tags=["react", "patterns"],
            days_ago=10,
            content_type="article",
        ),
    ]


@pytest.fixture
def sample_items_payload(sample_collection):
    """The sample collection as JSON-ready dicts."""
    return [item.to_dict() for item in sample_collection]
