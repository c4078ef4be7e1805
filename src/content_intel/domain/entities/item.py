"""
Content Item Entities - Saved Content Domain Model

A ContentItem is a saved content record owned by the caller (bookmark, note,
video, document...). The engines in this package only derive views over items,
they never mutate them, so both entities are frozen.

Example:
    >>> item = ContentItem(
    ...     id="42",
    ...     title="React Hooks Guide",
    ...     description="Everything about useState and useEffect.",
    ...     url="https://react.dev/learn",
    ...     tags=(Tag("react"), Tag("hooks")),
    ...     created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from content_intel.core.exceptions import InvalidItemError


def parse_timestamp(value: Any, *, item_id: Any = None) -> datetime:
    """
    Parse a creation timestamp into an aware UTC datetime.

    Accepts datetime objects and ISO-8601 strings (a trailing ``Z`` is allowed).
    Naive values are interpreted as UTC.

    Raises:
        InvalidItemError: If the value is missing or not a timestamp.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidItemError(f"created_at is not ISO-8601: {value!r}", item_id=item_id) from e
    else:
        raise InvalidItemError("created_at is required", item_id=item_id)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def as_utc(value: datetime | None) -> datetime:
    """Resolve a reference instant to aware UTC. ``None`` means now; naive values are UTC."""
    if value is None:
        return datetime.now(tz=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Tag:
    """A named tag attached to an item. Names are unique within one item."""

    name: str
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class ContentItem:
    """
    A saved content record.

    Attributes:
        id: Unique identifier
        title: Item title
        created_at: Creation timestamp (normalized to aware UTC)
        description: Free text body, may be empty
        url: Optional source URL
        tags: Ordered tags with unique names
        content_type: Optional classifier (article, video, document, image, note...)
    """

    id: str
    title: str
    created_at: datetime
    description: str = ""
    url: str | None = None
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    content_type: str | None = None

    def __post_init__(self) -> None:
        # Keep timestamp arithmetic safe when callers pass naive datetimes
        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.replace(tzinfo=timezone.utc))
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))
        if self.description is None:
            object.__setattr__(self, "description", "")

    @property
    def tag_names(self) -> list[str]:
        """Tag names in their original order."""
        return [tag.name for tag in self.tags]

    @property
    def text(self) -> str:
        """Title and description joined, used by the text heuristics."""
        return f"{self.title} {self.description}".strip()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentItem:
        """
        Build an item from a JSON-style mapping.

        Tags may be given as plain strings or as ``{"name": ..., "id": ...}``
        mappings. Duplicate tag names are dropped, keeping the first.

        Raises:
            InvalidItemError: If required fields are missing or malformed.
        """
        if not isinstance(data, dict):
            raise InvalidItemError(f"expected an object, got {type(data).__name__}")

        item_id = data.get("id")
        if item_id is None or (isinstance(item_id, str) and not item_id.strip()):
            raise InvalidItemError("id is required")

        title = data.get("title")
        if not isinstance(title, str):
            raise InvalidItemError("title must be a string", item_id=item_id)

        description = data.get("description") or ""
        if not isinstance(description, str):
            raise InvalidItemError("description must be a string", item_id=item_id)

        url = data.get("url") or None
        if url is not None and not isinstance(url, str):
            raise InvalidItemError("url must be a string", item_id=item_id)

        content_type = data.get("content_type") or data.get("type") or None
        if content_type is not None:
            if not isinstance(content_type, str):
                raise InvalidItemError("content_type must be a string", item_id=item_id)
            content_type = content_type.strip().lower() or None

        return cls(
            id=str(item_id),
            title=title,
            description=description,
            url=url,
            tags=_parse_tags(data.get("tags") or [], item_id),
            created_at=parse_timestamp(data.get("created_at"), item_id=item_id),
            content_type=content_type,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "tags": [tag.to_dict() for tag in self.tags],
            "created_at": self.created_at.isoformat(),
            "content_type": self.content_type,
        }


def _parse_tags(raw: Any, item_id: Any) -> tuple[Tag, ...]:
    if not isinstance(raw, list):
        raise InvalidItemError("tags must be a list", item_id=item_id)

    tags: list[Tag] = []
    seen: set[str] = set()
    for entry in raw:
        if isinstance(entry, str):
            tag = Tag(name=entry)
        elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
            tag_id = entry.get("id")
            tag = Tag(name=entry["name"], id=str(tag_id) if tag_id is not None else None)
        else:
            raise InvalidItemError(f"unsupported tag entry: {entry!r}", item_id=item_id)

        key = tag.name.lower()
        if key in seen:
            continue
        seen.add(key)
        tags.append(tag)
    return tuple(tags)
