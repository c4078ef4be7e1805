"""Tests for the DI container and environment configuration."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from content_intel.application.intelligence import DuplicateDetector, RelationshipLinker
from content_intel.container import (
    DEFAULT_CONFIG,
    ApplicationContainer,
    config_from_env,
    create_container,
    read_env_value,
)
from content_intel.core.exceptions import ConfigurationError

# ============================================================================
# DI Container Tests
# ============================================================================


class TestApplicationContainer:
    """Test the DI container manages services correctly."""

    def test_container_creation(self) -> None:
        container = ApplicationContainer()
        container.config.from_dict(DEFAULT_CONFIG)
        assert container.config.related_limit() == 10
        assert container.config.duplicate_threshold() == 0.8
        assert container.config.highlight_open() == "<mark>"

    def test_search_engine_singleton(self) -> None:
        container = create_container()
        assert container.search_engine() is container.search_engine()

    def test_shared_similarity_engine(self) -> None:
        """Linker and detector share one similarity engine instance."""
        container = create_container()
        similarity = container.similarity_engine()
        assert container.relationship_linker()._similarity is similarity
        assert container.duplicate_detector()._similarity is similarity

    def test_search_engine_uses_container_analyzer(self) -> None:
        container = create_container()
        assert container.search_engine().analyzer is container.query_analyzer()

    def test_content_analyzer_wiring(self) -> None:
        container = create_container()
        analyzer = container.content_analyzer()
        assert analyzer._linker is container.relationship_linker()
        assert analyzer._detector is container.duplicate_detector()

    def test_config_overrides_defaults(self) -> None:
        container = create_container({"related_limit": 3, "duplicate_threshold": 0.9})
        assert container.relationship_linker().limit == 3
        assert container.duplicate_detector().threshold == 0.9
        assert container.config.highlight_close() == "</mark>"

    def test_string_config_values_are_converted(self) -> None:
        container = create_container({"related_limit": "4", "duplicate_threshold": "0.75"})
        assert container.relationship_linker().limit == 4
        assert container.duplicate_detector().threshold == 0.75

    def test_custom_highlight_markers(self, sample_collection, now) -> None:
        container = create_container({"highlight_open": "**", "highlight_close": "**"})
        [first, *_] = container.search_engine().search("react", sample_collection, now=now)
        assert first.highlighted_title == "**React** Hooks Guide"

    def test_override_provider(self) -> None:
        """Container supports provider overriding for tests."""
        container = create_container()
        fake = MagicMock()
        container.summarizer.override(providers.Object(fake))
        assert container.summarizer() is fake
        container.summarizer.reset_override()
        assert container.summarizer() is not fake

    def test_types(self) -> None:
        container = create_container()
        assert isinstance(container.relationship_linker(), RelationshipLinker)
        assert isinstance(container.duplicate_detector(), DuplicateDetector)


# ============================================================================
# Environment Configuration Tests
# ============================================================================


class TestConfigFromEnv:
    def test_defaults(self) -> None:
        assert config_from_env({}) == DEFAULT_CONFIG

    def test_overrides(self) -> None:
        config = config_from_env(
            {
                "CONTENT_INTEL_RELATED_LIMIT": "5",
                "CONTENT_INTEL_DUPLICATE_THRESHOLD": "0.85",
            }
        )
        assert config["related_limit"] == 5
        assert config["duplicate_threshold"] == 0.85

    def test_blank_is_unset(self) -> None:
        assert config_from_env({"CONTENT_INTEL_RELATED_LIMIT": "  "}) == DEFAULT_CONFIG

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("CONTENT_INTEL_RELATED_LIMIT", "ten"),
            ("CONTENT_INTEL_RELATED_LIMIT", "0"),
            ("CONTENT_INTEL_RELATED_LIMIT", "-2"),
            ("CONTENT_INTEL_DUPLICATE_THRESHOLD", "high"),
            ("CONTENT_INTEL_DUPLICATE_THRESHOLD", "1.5"),
        ],
    )
    def test_malformed(self, name, value) -> None:
        with pytest.raises(ConfigurationError, match=name) as exc_info:
            config_from_env({name: value})
        assert exc_info.value.context.input_value == value

    def test_reads_os_environ(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_INTEL_RELATED_LIMIT", "7")
        assert config_from_env()["related_limit"] == 7

    def test_read_env_value(self) -> None:
        assert read_env_value({}, "PORT", int, lambda v: v > 0, "a port") is None
        assert read_env_value({"PORT": "80"}, "PORT", int, lambda v: v > 0, "a port") == 80
