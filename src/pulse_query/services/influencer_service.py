"""
Influencer Service.

Influencers keep source order unless a sort is requested; the public
sort name ``credibility`` maps to ``credibilityScore``.
"""

from __future__ import annotations

from typing import Optional

from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.services.base import QueryService, to_records


class InfluencerService(QueryService):
    """Query operations over tracked influencers."""

    resource = "influencers"

    def list_influencers(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.influencers), query)
