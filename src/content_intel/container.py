"""
Application DI Container (dependency-injector).

Centralizes construction of the stateless engines so the MCP server, the HTTP
API and the library client share one wiring.

Usage::

    from content_intel.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(
        {
            "related_limit": 10,
            "duplicate_threshold": 0.8,
            "highlight_open": "<mark>",
            "highlight_close": "</mark>",
        }
    )

    engine = container.search_engine()
    detector = container.duplicate_detector()

    # In tests, override any provider:
    container.summarizer.override(providers.Object(fake_summarizer))
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from dependency_injector import containers, providers

from content_intel.application.intelligence import (
    ContentAnalyzer,
    DuplicateDetector,
    RelationshipLinker,
    SimilarityEngine,
    Summarizer,
)
from content_intel.application.intelligence.duplicates import DEFAULT_DUPLICATE_THRESHOLD
from content_intel.application.intelligence.relationships import DEFAULT_RELATED_LIMIT
from content_intel.application.search import QueryAnalyzer, RelevanceScorer, SearchEngine
from content_intel.application.search.relevance import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN
from content_intel.core.exceptions import ConfigurationError, ErrorContext

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ENV_RELATED_LIMIT = "CONTENT_INTEL_RELATED_LIMIT"
ENV_DUPLICATE_THRESHOLD = "CONTENT_INTEL_DUPLICATE_THRESHOLD"

DEFAULT_CONFIG: dict[str, Any] = {
    "related_limit": DEFAULT_RELATED_LIMIT,
    "duplicate_threshold": DEFAULT_DUPLICATE_THRESHOLD,
    "highlight_open": HIGHLIGHT_OPEN,
    "highlight_close": HIGHLIGHT_CLOSE,
}


def read_env_value(environ: Mapping[str, str], name: str, convert: type, check: Any, expected: str) -> Any:
    """Read and convert one variable; None when unset, ConfigurationError when malformed."""
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = convert(raw)
    except ValueError:
        value = None
    if value is None or not check(value):
        raise ConfigurationError(
            f"{name}={raw!r} is not {expected}",
            context=ErrorContext(
                operation="load_config",
                input_value=raw,
                suggestion=f"Set {name} to {expected} or unset it",
            ),
        )
    return value


def config_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build container configuration from environment variables.

    Unset variables fall back to ``DEFAULT_CONFIG``.

    Raises:
        ConfigurationError: If a variable is set to a malformed value.
    """
    environ = os.environ if environ is None else environ
    config = dict(DEFAULT_CONFIG)

    related_limit = read_env_value(environ, ENV_RELATED_LIMIT, int, lambda v: v > 0, "a positive integer")
    if related_limit is not None:
        config["related_limit"] = related_limit

    threshold = read_env_value(environ, ENV_DUPLICATE_THRESHOLD, float, lambda v: 0.0 <= v <= 1.0, "a number in [0, 1]")
    if threshold is not None:
        config["duplicate_threshold"] = threshold

    return config


def create_container(config: Mapping[str, Any] | None = None) -> ApplicationContainer:
    """Create a container with defaults overlaid by ``config``."""
    container = ApplicationContainer()
    container.config.from_dict({**DEFAULT_CONFIG, **(config or {})})
    logger.debug("Container configured: %s", container.config())
    return container


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for Content Intelligence.

    Every service is a stateless singleton:
    - ``query_analyzer`` / ``relevance_scorer`` / ``search_engine``: search pipeline
    - ``similarity_engine``: pairwise four-signal similarity
    - ``relationship_linker`` / ``duplicate_detector``: built on the similarity engine
    - ``summarizer`` / ``content_analyzer``: per-item analysis
    """

    config = providers.Configuration()

    query_analyzer = providers.Singleton(QueryAnalyzer)

    relevance_scorer = providers.Singleton(RelevanceScorer)

    search_engine = providers.Singleton(
        SearchEngine,
        analyzer=query_analyzer,
        scorer=relevance_scorer,
        highlight_open=config.highlight_open,
        highlight_close=config.highlight_close,
    )

    similarity_engine = providers.Singleton(SimilarityEngine)

    relationship_linker = providers.Singleton(
        RelationshipLinker,
        similarity=similarity_engine,
        limit=config.related_limit.as_int(),
    )

    duplicate_detector = providers.Singleton(
        DuplicateDetector,
        similarity=similarity_engine,
        threshold=config.duplicate_threshold.as_float(),
    )

    summarizer = providers.Singleton(Summarizer)

    content_analyzer = providers.Singleton(
        ContentAnalyzer,
        linker=relationship_linker,
        detector=duplicate_detector,
    )


__all__ = [
    "DEFAULT_CONFIG",
    "ApplicationContainer",
    "config_from_env",
    "create_container",
    "read_env_value",
]
