"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from pulse_query.domain.value_objects import SortDirection


class PaginationConfig(BaseModel):
    """Pagination bounds enforced by the request validator."""

    max_page_size: int = Field(default=100, ge=1, le=100)


class MembershipConfig(BaseModel):
    """Settings for asset membership filters."""

    sentinel: str = Field(
        default="market_wide",
        description="Scope value that matches every asset",
    )


class ResourceQueryConfig(BaseModel):
    """Ordering rules for one resource kind."""

    default_sort: Optional[str] = Field(
        default=None, description="Sort field applied when none is requested"
    )
    default_order: SortDirection = SortDirection.ASC
    explicit_sort_order: SortDirection = Field(
        default=SortDirection.ASC,
        description="Direction used when a sort field is given without an order",
    )
    sortable_fields: List[str] = Field(default_factory=list)
    sort_aliases: Dict[str, str] = Field(default_factory=dict)


def _asset_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        sortable_fields=[
            "symbol",
            "name",
            "sector",
            "assetType",
            "currentPrice",
            "changePercent",
            "changeAmount",
            "volume",
            "marketCap",
            "sentiment.overall",
            "sentiment.technical",
            "sentiment.fundamental",
            "sentiment.social",
        ],
    )


def _news_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        default_sort="timestamp",
        default_order=SortDirection.DESC,
        explicit_sort_order=SortDirection.DESC,
        sortable_fields=["timestamp", "title", "source", "category", "impact", "sentiment"],
    )


def _alert_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        default_sort="timestamp",
        default_order=SortDirection.DESC,
        sortable_fields=[
            "timestamp",
            "severity",
            "type",
            "assetId",
            "assetType",
            "aiCoreAccuracy",
        ],
    )


def _event_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        default_sort="scheduledTime",
        default_order=SortDirection.ASC,
        sortable_fields=[
            "scheduledTime",
            "importance",
            "type",
            "asset",
            "aiCorePrediction.confidence",
        ],
    )


def _insight_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        default_sort="timestamp",
        default_order=SortDirection.DESC,
        sortable_fields=["timestamp", "confidence", "type", "asset"],
    )


def _influencer_resource() -> ResourceQueryConfig:
    return ResourceQueryConfig(
        explicit_sort_order=SortDirection.DESC,
        sortable_fields=["credibilityScore", "followerCount", "sentiment", "name"],
        sort_aliases={"credibility": "credibilityScore"},
    )


class ResourcesConfig(BaseModel):
    """Per-resource ordering rules."""

    assets: ResourceQueryConfig = Field(default_factory=_asset_resource)
    news: ResourceQueryConfig = Field(default_factory=_news_resource)
    alerts: ResourceQueryConfig = Field(default_factory=_alert_resource)
    events: ResourceQueryConfig = Field(default_factory=_event_resource)
    insights: ResourceQueryConfig = Field(default_factory=_insight_resource)
    influencers: ResourceQueryConfig = Field(default_factory=_influencer_resource)


class QueryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    membership: MembershipConfig = Field(default_factory=MembershipConfig)
    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)

    model_config = {"populate_by_name": True}
