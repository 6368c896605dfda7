"""
Services Module - Per-Resource Query Operations.

Each service receives the data source and the resource registry via
its constructor, gathers candidate records (merging and tagging where
needed) and runs them through the resource kind's query pipeline.

Components:
    - AssetService: Stocks, crypto, price history, market stats
    - DashboardService: Heads of several listings in one snapshot
    - NewsService: News listings and stats
    - AlertService: Merged asset/global alerts and stats
    - EventService: Scheduled events (with injected clock)
    - InsightService: AI insights
    - InfluencerService: Influencers
    - NotFoundError: Identifier lookup found nothing
"""

from pulse_query.services.alert_service import AlertService
from pulse_query.services.asset_service import AssetService
from pulse_query.services.dashboard_service import DashboardService
from pulse_query.services.errors import NotFoundError
from pulse_query.services.event_service import EventService
from pulse_query.services.influencer_service import InfluencerService
from pulse_query.services.insight_service import InsightService
from pulse_query.services.news_service import NewsService

__all__ = [
    "AlertService",
    "AssetService",
    "DashboardService",
    "EventService",
    "InfluencerService",
    "InsightService",
    "NewsService",
    "NotFoundError",
]
