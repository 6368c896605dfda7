"""
Filters Package - Per-Resource Predicate Sets.

Each module builds the PredicateSet of one resource kind and exports
the tuple of filter field names that kind understands.

Predicate sets:
    - asset_predicates: Stocks and cryptocurrencies
    - news_predicates: News items
    - alert_predicates: Merged asset and global alerts
    - event_predicates: Scheduled market events
    - insight_predicates: AI insights
    - influencer_predicates: Influencers

Design Principles:
    - Each criterion is independently testable
    - Absent filter values are skipped, present ones AND-ed
    - Sentinel scope value injected via constructor argument
"""

from pulse_query.filters.alerts import ALERT_FILTERS, alert_predicates
from pulse_query.filters.assets import ASSET_FILTERS, asset_predicates
from pulse_query.filters.events import EVENT_FILTERS, event_predicates
from pulse_query.filters.influencers import INFLUENCER_FILTERS, influencer_predicates
from pulse_query.filters.insights import INSIGHT_FILTERS, insight_predicates
from pulse_query.filters.news import NEWS_FILTERS, news_predicates

__all__ = [
    "ALERT_FILTERS",
    "ASSET_FILTERS",
    "EVENT_FILTERS",
    "INFLUENCER_FILTERS",
    "INSIGHT_FILTERS",
    "NEWS_FILTERS",
    "alert_predicates",
    "asset_predicates",
    "event_predicates",
    "influencer_predicates",
    "insight_predicates",
    "news_predicates",
]
