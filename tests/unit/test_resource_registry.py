"""
Unit Tests for ResourceRegistry.

Tests:
    - Registration and unregistration
    - Config updates
    - Pipeline factory
    - Thread-safety
"""

from __future__ import annotations

import threading

import pytest

from pulse_query.adapters.metrics_collector import InMemoryMetricsCollector
from pulse_query.config.models import QueryConfig, ResourceQueryConfig
from pulse_query.domain.value_objects import SortDirection
from pulse_query.filters import news_predicates
from pulse_query.query.pipeline import QueryPipeline
from pulse_query.registry.resource_registry import ResourceRegistry, create_default_registry


class TestResourceRegistryRegistration:
    """Tests for resource registration."""

    def test_register_new_resource(self) -> None:
        registry = ResourceRegistry()

        registry.register("news", news_predicates(), ResourceQueryConfig())

        assert registry.registered_count == 1
        assert "news" in registry.list_all()

    def test_register_with_description_and_tags(self) -> None:
        registry = ResourceRegistry()

        registry.register(
            "news",
            news_predicates(),
            ResourceQueryConfig(default_sort="timestamp"),
            description="Market news",
            tags=["text"],
        )

        info = registry.get("news")
        assert info.description == "Market news"
        assert info.tags == ["text"]
        assert info.to_dict()["filters"] == list(news_predicates().field_names)
        assert info.to_dict()["default_sort"] == "timestamp"

    def test_register_duplicate_raises(self) -> None:
        registry = ResourceRegistry()
        registry.register("news", news_predicates(), ResourceQueryConfig())

        with pytest.raises(ValueError, match="already registered"):
            registry.register("news", news_predicates(), ResourceQueryConfig())

    def test_unregister(self) -> None:
        registry = ResourceRegistry()
        registry.register("news", news_predicates(), ResourceQueryConfig())

        assert registry.unregister("news") is True
        assert registry.unregister("news") is False
        assert registry.registered_count == 0

    def test_clear(self) -> None:
        registry = create_default_registry()

        registry.clear()

        assert registry.registered_count == 0


class TestResourceRegistryPipelines:
    """Tests for the pipeline factory."""

    def test_get_pipeline_uses_config(self) -> None:
        registry = ResourceRegistry()
        registry.register(
            "news",
            news_predicates(),
            ResourceQueryConfig(default_sort="timestamp", default_order=SortDirection.DESC),
        )

        pipeline = registry.get_pipeline("news")

        assert isinstance(pipeline, QueryPipeline)
        assert pipeline.default_sort.field == "timestamp"
        assert pipeline.default_sort.direction == SortDirection.DESC

    def test_unknown_resource_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown resource"):
            ResourceRegistry().get_pipeline("portfolio")

    def test_update_config_affects_new_pipelines(self) -> None:
        registry = ResourceRegistry()
        registry.register("news", news_predicates(), ResourceQueryConfig())

        updated = registry.update_config("news", ResourceQueryConfig(default_sort="title"))

        assert updated is True
        assert registry.get_pipeline("news").default_sort.field == "title"
        assert registry.update_config("missing", ResourceQueryConfig()) is False

    def test_pipelines_share_metrics_collector(self) -> None:
        collector = InMemoryMetricsCollector()
        registry = create_default_registry(metrics_collector=collector)

        assert registry.get_pipeline("alerts").metrics_collector is collector


class TestDefaultRegistry:
    """Tests for create_default_registry."""

    def test_registers_every_kind(self) -> None:
        registry = create_default_registry()

        assert set(registry.list_all()) == {
            "assets",
            "news",
            "alerts",
            "events",
            "insights",
            "influencers",
        }

    def test_sentinel_from_config(self) -> None:
        """
        SCENARIO: Config changes the market-wide sentinel
        EXPECTED: Event pipeline matches the new sentinel only
        """
        # Arrange
        config = QueryConfig.model_validate({"membership": {"sentinel": "ALL_MARKETS"}})
        registry = create_default_registry(config)
        records = [{"asset": "ALL_MARKETS"}, {"asset": "market_wide"}]

        # Act
        result = registry.get_pipeline("events").run(records, {"asset": "BTC"})

        # Assert
        assert result.data == [{"asset": "ALL_MARKETS"}]


class TestResourceRegistryThreadSafety:
    """Concurrent registration."""

    def test_concurrent_registration(self) -> None:
        registry = ResourceRegistry()
        errors = []

        def register(i: int) -> None:
            try:
                registry.register(f"kind_{i}", news_predicates(), ResourceQueryConfig())
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=register, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert registry.registered_count == 20
