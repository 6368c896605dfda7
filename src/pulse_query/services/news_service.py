"""
News Service.

Listings are most recent first unless the caller sorts explicitly.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional

from pulse_query.domain.value_objects import ListQuery, PageResult
from pulse_query.services.base import QueryService, to_records


class NewsService(QueryService):
    """Query operations over market news."""

    resource = "news"

    def list_news(self, query: Optional[ListQuery] = None) -> PageResult:
        return self._run(to_records(self.data_source.news), query)

    def list_news_by_asset(
        self, symbol: str, query: Optional[ListQuery] = None
    ) -> PageResult:
        """News whose affected assets include the symbol."""
        return self._run(to_records(self.data_source.news), query, asset=symbol)

    def list_news_by_category(
        self, category: str, query: Optional[ListQuery] = None
    ) -> PageResult:
        return self._run(to_records(self.data_source.news), query, category=category)

    def get_news_stats(self) -> Dict[str, Any]:
        """Counts by category, impact and affected asset, plus mean sentiment."""
        news = self.data_source.news
        affected: Counter = Counter()
        for item in news:
            affected.update(item.affected_assets)

        return {
            "totalNews": len(news),
            "byCategory": dict(Counter(item.category for item in news)),
            "byImpact": dict(Counter(item.impact for item in news)),
            "averageSentiment": (
                sum(item.sentiment for item in news) / len(news) if news else 0.0
            ),
            "mostAffectedAssets": dict(affected),
        }
