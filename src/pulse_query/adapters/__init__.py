"""
Adapters Module - Concrete Implementations.

Components:
    - StaticMarketDataSource: In-memory served collections (seed data)
    - InMemoryMetricsCollector: In-memory metrics sink
"""

from pulse_query.adapters.metrics_collector import InMemoryMetricsCollector, MetricEntry
from pulse_query.adapters.static_source import StaticMarketDataSource

__all__ = [
    "InMemoryMetricsCollector",
    "MetricEntry",
    "StaticMarketDataSource",
]
