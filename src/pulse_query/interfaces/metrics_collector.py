"""
Metrics Collector Protocol.

Defines the abstract interface for query metrics collection. The
pipeline records how long queries take and how many records they
match, tagged by resource kind.

Design Notes:
    - Non-blocking metric recording
    - Tag/label support for dimensionality
    - Optional dependency: the pipeline runs without a collector
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a timing metric (histogram).

        Args:
            name: Metric name (e.g., "query_duration_seconds")
            duration_seconds: Duration value
            tags: Optional dimension tags
        """
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a count metric (counter).

        Args:
            name: Metric name (e.g., "records_matched_total")
            value: Count value
            tags: Optional dimension tags
        """
        ...

    def get_metrics(self) -> Dict[str, Any]:
        """Get all collected metrics."""
        ...
