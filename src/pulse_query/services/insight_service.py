"""
Insight Service - AI Core Insights.
"""

from __future__ import annotations

from typing import Optional

from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.services.base import QueryService, to_records


class InsightService(QueryService):
    """Query operations over AI insights, most recent first by default."""

    resource = "insights"

    def list_insights(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.insights), query)
