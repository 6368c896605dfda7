"""
Resource Registry - Query Profiles by Resource Kind.

This module provides a thread-safe registry mapping each resource kind
to its predicate set and ordering rules. Services ask the registry for
a ready-to-run QueryPipeline instead of wiring one themselves.

Usage:
    registry = ResourceRegistry()
    registry.register("news", news_predicates(), config.resources.news)

    pipeline = registry.get_pipeline("news")
    result = pipeline.run(records, filters, sort, page)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional

from pulse_query.config.models import QueryConfig, ResourceQueryConfig
from pulse_query.filters import (
    alert_predicates,
    asset_predicates,
    event_predicates,
    influencer_predicates,
    insight_predicates,
    news_predicates,
)
from pulse_query.interfaces.metrics_collector import MetricsCollector
from pulse_query.query.pipeline import QueryPipeline
from pulse_query.query.predicates import PredicateSet

logger = logging.getLogger(__name__)


@dataclass
class ResourceInfo:
    """Metadata about a registered resource kind."""

    name: str
    predicates: PredicateSet
    config: ResourceQueryConfig
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "tags": self.tags,
            "filters": list(self.predicates.field_names),
            "default_sort": self.config.default_sort,
            "sortable_fields": list(self.config.sortable_fields),
        }


class ResourceRegistry:
    """
    Thread-safe registry of queryable resource kinds.

    Supports:
        - Registration of predicate sets with their ordering rules
        - Config updates after registration
        - Factory for QueryPipeline instances
    """

    def __init__(self, metrics_collector: Optional[MetricsCollector] = None) -> None:
        """
        Initialize empty registry.

        Args:
            metrics_collector: Passed to every pipeline the registry builds
        """
        self._resources: Dict[str, ResourceInfo] = {}
        self._lock = RLock()
        self._metrics_collector = metrics_collector
        logger.debug("ResourceRegistry initialized")

    def register(
        self,
        name: str,
        predicates: PredicateSet,
        config: ResourceQueryConfig,
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a resource kind.

        Args:
            name: Unique resource kind name
            predicates: Filter criteria of the kind
            config: Ordering rules of the kind
            description: Optional description
            tags: Optional tags for categorization

        Raises:
            ValueError: If the name is already registered
        """
        with self._lock:
            if name in self._resources:
                raise ValueError(
                    f"Resource '{name}' is already registered. "
                    f"Use unregister() first or update_config()."
                )

            self._resources[name] = ResourceInfo(
                name=name,
                predicates=predicates,
                config=config,
                description=description,
                tags=tags or [],
            )
            logger.info(f"Registered resource: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a resource kind.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._resources:
                logger.warning(f"Cannot unregister: resource '{name}' not found")
                return False

            del self._resources[name]
            logger.info(f"Unregistered resource: {name}")
            return True

    def get(self, name: str) -> Optional[ResourceInfo]:
        """Get registration info for a resource kind."""
        with self._lock:
            return self._resources.get(name)

    def get_pipeline(self, name: str) -> QueryPipeline:
        """
        Build a pipeline for a resource kind.

        Args:
            name: Resource kind name

        Returns:
            QueryPipeline configured for the kind

        Raises:
            KeyError: If the kind is not registered
        """
        with self._lock:
            info = self._resources.get(name)
            if info is None:
                raise KeyError(f"Unknown resource: {name}")

            return QueryPipeline.from_config(
                info.predicates,
                info.config,
                metrics_collector=self._metrics_collector,
            )

    def list_all(self) -> Dict[str, ResourceInfo]:
        """List all registered resource kinds."""
        with self._lock:
            return dict(self._resources)

    def update_config(self, name: str, config: ResourceQueryConfig) -> bool:
        """
        Replace the ordering rules of a registered kind.

        Returns:
            True if updated, False if not found
        """
        with self._lock:
            if name not in self._resources:
                return False

            self._resources[name].config = config
            logger.info(f"Updated config for resource: {name}")
            return True

    @property
    def registered_count(self) -> int:
        """Total number of registered resource kinds."""
        with self._lock:
            return len(self._resources)

    def clear(self) -> None:
        """Remove all registered resource kinds."""
        with self._lock:
            self._resources.clear()
            logger.info("Cleared all resources from registry")


def create_default_registry(
    config: Optional[QueryConfig] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> ResourceRegistry:
    """
    Register every built-in resource kind.

    Args:
        config: Query configuration (defaults if omitted)
        metrics_collector: Optional metrics sink for all pipelines

    Returns:
        Populated ResourceRegistry
    """
    config = config or QueryConfig()
    sentinel = config.membership.sentinel
    resources = config.resources

    registry = ResourceRegistry(metrics_collector=metrics_collector)
    registry.register("assets", asset_predicates(), resources.assets, "Stocks and crypto")
    registry.register("news", news_predicates(), resources.news, "Market news")
    registry.register("alerts", alert_predicates(), resources.alerts, "Asset and global alerts")
    registry.register("events", event_predicates(sentinel), resources.events, "Scheduled events")
    registry.register("insights", insight_predicates(sentinel), resources.insights, "AI insights")
    registry.register("influencers", influencer_predicates(), resources.influencers, "Influencers")
    return registry
