"""
Dashboard Service - One-Shot Market Overview.

Combines the head of several listings into one read-only snapshot:

    - recentNews: newest news items
    - activeAlerts: newest of each asset's leading alert plus global alerts
    - topGainers / topLosers: largest positive / negative daily movers
    - aiInsights: newest insights
    - upcomingEvents: soonest events still ahead of the clock

Every section runs through the owning service, so the same pipelines,
sort rules and metrics apply as for the individual listings.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pulse_query.domain.value_objects import (
    ListQuery,
    PageRequest,
    PageResult,
    SortDirection,
    SortSpec,
)
from pulse_query.services.alert_service import AlertService
from pulse_query.services.asset_service import AssetService
from pulse_query.services.event_service import EventService
from pulse_query.services.insight_service import InsightService
from pulse_query.services.news_service import NewsService

logger = logging.getLogger(__name__)

# Section sizes
RECENT_NEWS = 5
ACTIVE_ALERTS = 10
TOP_MOVERS = 5
RECENT_INSIGHTS = 5
UPCOMING_EVENTS = 5


def _head(size: int, sort: Optional[SortSpec] = None) -> ListQuery:
    return ListQuery(sort=sort, page=PageRequest(page=1, page_size=size))


def _data(result: PageResult) -> List[Dict[str, Any]]:
    return list(result.data)


class DashboardService:
    """Builds the dashboard snapshot from the per-resource services."""

    def __init__(
        self,
        assets: AssetService,
        news: NewsService,
        alerts: AlertService,
        events: EventService,
        insights: InsightService,
    ) -> None:
        self.assets = assets
        self.news = news
        self.alerts = alerts
        self.events = events
        self.insights = insights

    def get_dashboard(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Build the dashboard snapshot.

        Returns:
            Section name -> records, each section in its display order
        """
        by_change = "changePercent"
        dashboard = {
            "recentNews": _data(self.news.list_news(_head(RECENT_NEWS))),
            "activeAlerts": _data(self.alerts.list_active_alerts(_head(ACTIVE_ALERTS))),
            "topGainers": _data(
                self.assets.list_gainers(
                    _head(TOP_MOVERS, SortSpec(field=by_change, direction=SortDirection.DESC))
                )
            ),
            "topLosers": _data(
                self.assets.list_losers(
                    _head(TOP_MOVERS, SortSpec(field=by_change, direction=SortDirection.ASC))
                )
            ),
            "aiInsights": _data(self.insights.list_insights(_head(RECENT_INSIGHTS))),
            "upcomingEvents": _data(
                self.events.list_upcoming_events(_head(UPCOMING_EVENTS))
            ),
        }
        sizes = ", ".join(f"{name}={len(rows)}" for name, rows in dashboard.items())
        logger.debug(f"Dashboard built: {sizes}")
        return dashboard
