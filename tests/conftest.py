"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import pytest

from pulse_query.adapters.metrics_collector import InMemoryMetricsCollector
from pulse_query.adapters.static_source import StaticMarketDataSource
from pulse_query.api.handlers import QueryHandlers, create_handlers
from pulse_query.config.models import QueryConfig
from pulse_query.registry.resource_registry import ResourceRegistry, create_default_registry

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """Reference time used for seed data and clocks."""
    return FIXED_NOW


@pytest.fixture
def config_dir() -> Path:
    """Path to the shipped configuration directory."""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def default_config() -> QueryConfig:
    """Create default query configuration."""
    return QueryConfig()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def seed_source() -> StaticMarketDataSource:
    """Seed data anchored at FIXED_NOW."""
    return StaticMarketDataSource.from_seed(now=FIXED_NOW, seed=42)


@pytest.fixture
def registry(default_config: QueryConfig) -> ResourceRegistry:
    """Registry with every built-in resource kind."""
    return create_default_registry(default_config)


@pytest.fixture
def handlers(
    seed_source: StaticMarketDataSource,
    metrics_collector: InMemoryMetricsCollector,
) -> QueryHandlers:
    """Handlers over the seed data with a fixed clock."""
    return create_handlers(
        seed_source,
        metrics_collector=metrics_collector,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def five_assets() -> List[Dict[str, Any]]:
    """Five stock records with distinct daily changes."""
    return [
        {"symbol": "AAPL", "name": "Apple Inc.", "changePercent": 2.34, "currentPrice": 178.45},
        {"symbol": "TSLA", "name": "Tesla Inc.", "changePercent": -1.23, "currentPrice": 248.90},
        {"symbol": "NVDA", "name": "NVIDIA Corporation", "changePercent": 3.45, "currentPrice": 485.20},
        {"symbol": "MSFT", "name": "Microsoft Corporation", "changePercent": 0.89, "currentPrice": 378.25},
        {"symbol": "GOOGL", "name": "Alphabet Inc.", "changePercent": -0.45, "currentPrice": 142.80},
    ]


@pytest.fixture
def thirteen_records() -> List[Dict[str, Any]]:
    """Records numbered 1..13 in input order."""
    return [{"id": f"rec_{i}", "rank": i} for i in range(1, 14)]
