"""
Domain Layer - Market Entities and Query Value Objects.

Entities:
    - Stock, Crypto: Tradable assets, discriminated by ``asset_type``
    - NewsItem, MarketEvent, Insight, Influencer: Served collections
    - AssetAlert, MarketAlert: Members of the merged alert collection

Value Objects:
    - SortSpec, PageRequest, ListQuery: Query parameters
    - PaginationMeta, PageResult: Query results

Design Principles:
    - Immutable (frozen pydantic models)
    - camelCase JSON form, snake_case Python attributes
    - No infrastructure dependencies
"""

from pulse_query.domain.entities import (
    Asset,
    AssetAlert,
    AssetKind,
    Crypto,
    EmbeddedAlert,
    EventPrediction,
    GlobalAlert,
    Influencer,
    InfluencerPrediction,
    Insight,
    MarketAlert,
    MarketEvent,
    NewsItem,
    PricePoint,
    Sentiment,
    Stock,
    TaggedAlert,
)
from pulse_query.domain.value_objects import (
    FilterCriteria,
    ListQuery,
    PageRequest,
    PageResult,
    PaginationMeta,
    Record,
    SortDirection,
    SortSpec,
)

__all__ = [
    "Asset",
    "AssetAlert",
    "AssetKind",
    "Crypto",
    "EmbeddedAlert",
    "EventPrediction",
    "GlobalAlert",
    "Influencer",
    "InfluencerPrediction",
    "Insight",
    "MarketAlert",
    "MarketEvent",
    "NewsItem",
    "PricePoint",
    "Sentiment",
    "Stock",
    "TaggedAlert",
    "FilterCriteria",
    "ListQuery",
    "PageRequest",
    "PageResult",
    "PaginationMeta",
    "Record",
    "SortDirection",
    "SortSpec",
]
