"""
In-Memory Metrics Collector.

Keeps recorded query metrics as MetricEntry objects, holding at most
``max_entries`` per metric name; older entries drop off first, and
summaries describe the retained entries. Summaries can be taken per
metric name or broken down by one tag (usually ``resource``).
"""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, DefaultDict, Deque, Dict, Iterable, List, Optional

DEFAULT_MAX_ENTRIES = 10_000


@dataclass(frozen=True)
class MetricEntry:
    """One recorded value."""

    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def has_tags(self, tags: Dict[str, str]) -> bool:
        return all(self.tags.get(key) == value for key, value in tags.items())


def _summarize(entries: Iterable[MetricEntry]) -> Dict[str, Any]:
    values = [entry.value for entry in entries]
    return {"count": len(values), "total": sum(values), "last": values[-1]}


class InMemoryMetricsCollector:
    """Thread-safe metrics sink for query pipelines."""

    def __init__(self, max_entries: Optional[int] = DEFAULT_MAX_ENTRIES) -> None:
        """
        Args:
            max_entries: Entries kept per metric name (None keeps all)
        """
        self._max_entries = max_entries
        self._series: DefaultDict[str, Deque[MetricEntry]] = defaultdict(
            lambda: deque(maxlen=self._max_entries)
        )
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(name, MetricEntry("timing", duration_seconds, dict(tags or {})))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(name, MetricEntry("count", value, dict(tags or {})))

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarize every metric.

        Returns:
            Per metric name: entry count, sum of values, last value
        """
        with self._lock:
            return {
                name: _summarize(entries)
                for name, entries in self._series.items()
                if entries
            }

    def get_entries(
        self,
        name: str,
        tags: Optional[Dict[str, str]] = None,
    ) -> List[MetricEntry]:
        """Entries of one metric, optionally narrowed to matching tags."""
        with self._lock:
            entries = list(self._series.get(name, ()))
        if tags:
            entries = [entry for entry in entries if entry.has_tags(tags)]
        return entries

    def summary_by(self, name: str, tag: str) -> Dict[str, Dict[str, Any]]:
        """
        Summarize one metric per value of a tag.

        Entries without the tag are left out.

        Example:
            >>> collector.summary_by("records_matched_total", "resource")
            {'news': {'count': 2, 'total': 16, 'last': 8}}
        """
        grouped: DefaultDict[str, List[MetricEntry]] = defaultdict(list)
        for entry in self.get_entries(name):
            if tag in entry.tags:
                grouped[entry.tags[tag]].append(entry)
        return {value: _summarize(entries) for value, entries in grouped.items()}

    def clear(self) -> None:
        """Drop all recorded entries."""
        with self._lock:
            self._series.clear()

    def _append(self, name: str, entry: MetricEntry) -> None:
        with self._lock:
            self._series[name].append(entry)
