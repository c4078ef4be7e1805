"""
Common utilities for MCP tools.

Shared functions:
- Error payload formatting
- Decoding JSON tool arguments into ContentItem objects
"""

from __future__ import annotations

import json
import logging
from typing import Any

from content_intel.core.exceptions import ContentIntelError, ErrorContext, InvalidItemError, ParseError
from content_intel.domain.entities import ContentItem

logger = logging.getLogger(__name__)

ITEMS_EXAMPLE = (
    '[{"id": "1", "title": "React Hooks Guide", "tags": ["react", "hooks"], '
    '"created_at": "2024-05-01T10:00:00Z"}]'
)


class ResponseFormatter:
    """Consistent JSON error payloads for every tool."""

    @staticmethod
    def error(
        error: str | Exception,
        suggestion: str | None = None,
        example: str | None = None,
        tool_name: str | None = None,
    ) -> str:
        """
        Format an error for the agent.

        ContentIntelError instances contribute their own category, suggestion
        and example; explicit arguments take precedence.
        """
        payload: dict[str, Any] = {"success": False}
        if isinstance(error, ContentIntelError):
            payload.update(error.to_dict())
        else:
            payload["error"] = str(error)

        if suggestion:
            payload["suggestion"] = suggestion
        if example:
            payload["example"] = example
        if tool_name:
            payload["tool"] = tool_name

        logger.warning("Tool %s failed: %s", tool_name or "<unknown>", payload["error"])
        return json.dumps(payload, indent=2, ensure_ascii=False)


def parse_json_argument(raw: str, name: str) -> Any:
    """
    Decode a JSON tool argument.

    Raises:
        ParseError: If ``raw`` is empty or not valid JSON.
    """
    if not raw or not raw.strip():
        raise ParseError(
            f"{name} is empty",
            source=name,
            context=ErrorContext(suggestion=f"Provide {name} as a JSON value", example=ITEMS_EXAMPLE),
        )
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"invalid JSON ({e.msg} at position {e.pos})",
            source=name,
            context=ErrorContext(suggestion=f"Ensure {name} is valid JSON", example=ITEMS_EXAMPLE),
        ) from e


def parse_items_json(items_json: str, name: str = "items_json") -> list[ContentItem]:
    """
    Decode a JSON array of item objects.

    Raises:
        ParseError: If the argument is not a JSON array.
        InvalidItemError: If any element is not a valid item.
    """
    decoded = parse_json_argument(items_json, name)
    if not isinstance(decoded, list):
        raise ParseError(
            f"expected a JSON array, got {type(decoded).__name__}",
            source=name,
            context=ErrorContext(suggestion="Wrap the items in [...]", example=ITEMS_EXAMPLE),
        )
    return [ContentItem.from_dict(entry) for entry in decoded]


def parse_item_json(item_json: str, name: str = "item_json") -> ContentItem:
    """
    Decode a single JSON item object.

    Raises:
        ParseError: If the argument is not valid JSON.
        InvalidItemError: If the object is not a valid item.
    """
    decoded = parse_json_argument(item_json, name)
    if not isinstance(decoded, dict):
        raise InvalidItemError(f"{name} must be a JSON object")
    return ContentItem.from_dict(decoded)
