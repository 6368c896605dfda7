"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - MarketDataSource: Read-only access to the served collections
    - MetricsCollector: Query metrics abstraction

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from pulse_query.interfaces.market_data_source import MarketDataSource
from pulse_query.interfaces.metrics_collector import MetricsCollector

__all__ = [
    "MarketDataSource",
    "MetricsCollector",
]
