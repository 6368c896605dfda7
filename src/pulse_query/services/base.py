"""
Base Query Service.

Shared plumbing for the per-resource services: dump entities to
records and run a listing through the resource kind's pipeline.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from pulse_query.domain.entities import Entity
from pulse_query.domain.value_objects import ListQuery, PageResult, Record
from pulse_query.interfaces.market_data_source import MarketDataSource
from pulse_query.registry.resource_registry import ResourceRegistry

logger = logging.getLogger(__name__)


def to_records(entities: Iterable[Entity]) -> List[Dict[str, Any]]:
    """Dump entities to their JSON record form."""
    return [entity.to_record() for entity in entities]


class QueryService:
    """Base class for services that list one resource kind."""

    resource: str = ""

    def __init__(
        self,
        data_source: MarketDataSource,
        registry: ResourceRegistry,
    ) -> None:
        """
        Initialize service with injected dependencies.

        Args:
            data_source: Read-only served collections
            registry: Resource registry providing query pipelines
        """
        self.data_source = data_source
        self.registry = registry

    def _run(
        self,
        records: List[Record],
        query: Optional[ListQuery] = None,
        **forced_filters: Any,
    ) -> PageResult:
        """
        Run a listing through this resource's pipeline.

        Args:
            records: Candidate records
            query: Filters, sort and page from the caller
            forced_filters: Filter values fixed by the operation itself,
                overriding any caller value of the same name
        """
        query = query or ListQuery()
        filters = dict(query.filters)
        filters.update(forced_filters)

        pipeline = self.registry.get_pipeline(self.resource)
        return pipeline.run(records, filters, query.sort, query.page)
