"""
Query Pipeline - Filter, Sort, Paginate.

The QueryPipeline runs one listing query for one resource kind:

    1. Filter: narrow via the resource's PredicateSet (only when a
       criterion is present)
    2. Sort: requested field, else the resource's default sort
    3. Paginate: only when both page and page size are given

Sorting always sees the full filtered set. The input sequence is never
modified, and an empty result is a normal outcome.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, Optional, Sequence, Tuple

from pulse_query.config.models import ResourceQueryConfig
from pulse_query.domain.value_objects import (
    FilterCriteria,
    PageRequest,
    PageResult,
    Record,
    SortDirection,
    SortSpec,
)
from pulse_query.interfaces.metrics_collector import MetricsCollector
from pulse_query.query.comparator import sort_records
from pulse_query.query.pagination import paginate
from pulse_query.query.predicates import PredicateSet

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Orchestrates filter -> sort -> paginate over a record sequence."""

    def __init__(
        self,
        predicates: PredicateSet,
        *,
        default_sort: Optional[SortSpec] = None,
        explicit_sort_order: SortDirection = SortDirection.ASC,
        sortable_fields: Optional[Iterable[str]] = None,
        sort_aliases: Optional[Dict[str, str]] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            predicates: Filter criteria of the resource kind
            default_sort: Applied when the request names no sort field
            explicit_sort_order: Direction for a requested field without order
            sortable_fields: Allowed sort paths (None or empty = any path)
            sort_aliases: Public sort names mapped to record paths
            metrics_collector: Optional metrics sink
        """
        self.predicates = predicates
        self.default_sort = default_sort
        self.explicit_sort_order = explicit_sort_order
        self.sortable_fields = frozenset(sortable_fields or ())
        self.sort_aliases = dict(sort_aliases or {})
        self.metrics_collector = metrics_collector

    @classmethod
    def from_config(
        cls,
        predicates: PredicateSet,
        config: ResourceQueryConfig,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> "QueryPipeline":
        """Build a pipeline from a resource's ordering configuration."""
        default_sort = None
        if config.default_sort:
            default_sort = SortSpec(
                field=config.default_sort, direction=config.default_order
            )
        return cls(
            predicates,
            default_sort=default_sort,
            explicit_sort_order=config.explicit_sort_order,
            sortable_fields=config.sortable_fields,
            sort_aliases=config.sort_aliases,
            metrics_collector=metrics_collector,
        )

    @property
    def resource(self) -> str:
        return self.predicates.name

    def run(
        self,
        records: Sequence[Record],
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortSpec] = None,
        page: Optional[PageRequest] = None,
    ) -> PageResult:
        """
        Execute the query.

        Args:
            records: Candidate records (left untouched)
            filters: Raw filter values by filter field name
            sort: Requested sort, if any
            page: Requested page, if any

        Returns:
            PageResult; ``pagination`` is None for unpaginated requests
        """
        start_time = time.perf_counter()

        # 1. Filter
        if self.predicates.has_active(filters):
            matched = self.predicates.apply(records, filters)
        else:
            matched = list(records)

        # 2. Sort
        resolved = self.resolve_sort(sort)
        if resolved is not None:
            field, direction = resolved
            matched = sort_records(matched, field, direction)
            logger.debug(f"{self.resource}: sorted by {field} {direction.value}")

        # 3. Paginate
        if page is not None:
            result = paginate(matched, page.page, page.page_size)
        else:
            result = PageResult(data=matched)

        self._record_metrics(len(matched), time.perf_counter() - start_time)
        return result

    def resolve_sort(
        self, sort: Optional[SortSpec]
    ) -> Optional[Tuple[str, SortDirection]]:
        """
        Decide which field and direction to sort by.

        Returns:
            (field path, direction), or None to keep filter order
        """
        if sort is None or not sort.field:
            if self.default_sort is None:
                return None
            return (
                self.default_sort.field,
                self.default_sort.direction or SortDirection.ASC,
            )

        field = self.sort_aliases.get(sort.field, sort.field)
        if self.sortable_fields and field not in self.sortable_fields:
            logger.debug(f"{self.resource}: ignoring unsortable field '{sort.field}'")
            return None
        return field, sort.direction or self.explicit_sort_order

    def _record_metrics(self, matched_count: int, duration: float) -> None:
        if self.metrics_collector is None:
            return
        tags = {"resource": self.resource}
        self.metrics_collector.record_timing("query_duration_seconds", duration, tags)
        self.metrics_collector.record_count("records_matched_total", matched_count, tags)
