"""
Event Service - Scheduled Market Events.

Events scoped to the market-wide sentinel match every asset filter.
Listings run soonest first unless the caller sorts explicitly.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.interfaces.market_data_source import MarketDataSource
from pulse_query.registry.resource_registry import ResourceRegistry
from pulse_query.services.base import QueryService, to_records


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventService(QueryService):
    """Query operations over scheduled market events."""

    resource = "events"

    def __init__(
        self,
        data_source: MarketDataSource,
        registry: ResourceRegistry,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Args:
            data_source: Read-only served collections
            registry: Resource registry providing query pipelines
            clock: Returns the current time (aware) for upcoming-event checks
        """
        super().__init__(data_source, registry)
        self.clock = clock

    def list_events(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.events), query)

    def list_upcoming_events(self, query: Optional[ListQuery] = None) -> PageResult:
        """Events scheduled strictly after now."""
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        upcoming = [
            event
            for event in self.data_source.events
            if _aware(event.scheduled_time) > now
        ]
        return self._run(to_records(upcoming), query)


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
