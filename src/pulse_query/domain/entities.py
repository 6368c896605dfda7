"""
Core Domain Entities.

This module defines the market data entities served by the query
surface. Entities are immutable pydantic models whose JSON form uses
camelCase field names; the query pipeline operates on that JSON form
(see ``to_record``).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


def to_camel(name: str) -> str:
    """Convert a snake_case field name to its camelCase JSON alias."""
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


class Entity(BaseModel):
    """Base class for all served entities."""

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_record(self) -> Dict[str, Any]:
        """Dump to the JSON-compatible record shape used by the pipeline."""
        return self.model_dump(mode="json", by_alias=True)


class AssetKind(str, Enum):
    """Classification of tradable assets."""

    STOCK = "stock"
    CRYPTO = "crypto"


class PricePoint(Entity):
    """One point of an asset's price history."""

    timestamp: datetime
    price: float
    volume: int


class Sentiment(Entity):
    """Sentiment scores for an asset (0.0 - 1.0)."""

    overall: float
    technical: float
    fundamental: float
    social: float


class EmbeddedAlert(Entity):
    """Alert attached to a single asset."""

    id: str
    type: str
    severity: str
    message: str
    timestamp: datetime
    impact: str


class Asset(Entity):
    """Represents a tradable instrument."""

    id: str
    symbol: str = Field(..., description="Ticker symbol")
    name: str = Field(..., description="Full company/asset name")
    current_price: float
    change_percent: float
    change_amount: float
    volume: int
    market_cap: int
    price_history: List[PricePoint] = Field(default_factory=list)
    alerts: List[EmbeddedAlert] = Field(default_factory=list)
    sentiment: Optional[Sentiment] = None
    key_metrics: Dict[str, Optional[float]] = Field(default_factory=dict)


class Stock(Asset):
    """Listed equity."""

    asset_type: Literal["stock"] = "stock"
    sector: str


class Crypto(Asset):
    """Cryptocurrency."""

    asset_type: Literal["crypto"] = "crypto"


class NewsItem(Entity):
    """Market news article."""

    id: str
    title: str
    source: str
    category: str
    timestamp: datetime
    impact: str
    affected_assets: List[str] = Field(default_factory=list)
    summary: str
    sentiment: float
    tags: List[str] = Field(default_factory=list)


class GlobalAlert(Entity):
    """Alert that is not attached to a single asset."""

    id: str
    type: str
    severity: str
    title: str
    message: str
    timestamp: datetime
    affected_assets: List[str] = Field(default_factory=list)
    action_required: bool = False
    ai_core_accuracy: Optional[float] = None


class AssetAlert(EmbeddedAlert):
    """Embedded alert tagged with its owning asset."""

    asset_id: str
    asset_type: Literal["stock", "crypto"]


class MarketAlert(GlobalAlert):
    """Global alert tagged for the merged alert collection."""

    asset_type: Literal["global"] = "global"


# Merged alert collection member, discriminated by ``assetType``
TaggedAlert = Annotated[
    Union[AssetAlert, MarketAlert],
    Field(discriminator="asset_type"),
]


class EventPrediction(Entity):
    """AI prediction attached to a scheduled event."""

    confidence: float
    predicted_move: str
    magnitude: str


class MarketEvent(Entity):
    """Scheduled market event (earnings, macro release, upgrade...)."""

    id: str
    type: str
    asset: str = Field(..., description="Symbol or the market-wide sentinel")
    scheduled_time: datetime
    importance: str
    expected_impact: str
    description: str
    ai_core_prediction: Optional[EventPrediction] = None


class Insight(Entity):
    """AI-generated market insight."""

    id: str
    type: str
    asset: str = Field(..., description="Symbol or the market-wide sentinel")
    confidence: float
    title: str
    description: str
    timestamp: datetime
    actionable: bool


class InfluencerPrediction(Entity):
    """A public call made by an influencer."""

    id: str
    asset: str
    prediction: str
    confidence: float
    timestamp: datetime
    target_price: float
    timeframe: str


class Influencer(Entity):
    """Tracked social media market commentator."""

    id: str
    name: str
    handle: str
    platform: str
    follower_count: int
    credibility_score: float
    recent_predictions: List[InfluencerPrediction] = Field(default_factory=list)
    sentiment: float
