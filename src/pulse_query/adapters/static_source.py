"""
Static Market Data Source.

An in-memory data source holding the served collections. Collections
are stored as tuples and never change after construction.

Use ``StaticMarketDataSource.from_seed()`` for the built-in demo data
with deterministic price history.
"""

from __future__ import annotations

import logging
import math
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pulse_query.adapters import seed_data
from pulse_query.domain.entities import (
    Crypto,
    EmbeddedAlert,
    EventPrediction,
    GlobalAlert,
    Influencer,
    InfluencerPrediction,
    Insight,
    MarketEvent,
    NewsItem,
    PricePoint,
    Sentiment,
    Stock,
)

logger = logging.getLogger(__name__)


class StaticMarketDataSource:
    """Immutable in-memory collections of market data."""

    def __init__(
        self,
        stocks: Iterable[Stock] = (),
        cryptocurrencies: Iterable[Crypto] = (),
        news: Iterable[NewsItem] = (),
        global_alerts: Iterable[GlobalAlert] = (),
        events: Iterable[MarketEvent] = (),
        insights: Iterable[Insight] = (),
        influencers: Iterable[Influencer] = (),
    ) -> None:
        self._stocks = tuple(stocks)
        self._cryptocurrencies = tuple(cryptocurrencies)
        self._news = tuple(news)
        self._global_alerts = tuple(global_alerts)
        self._events = tuple(events)
        self._insights = tuple(insights)
        self._influencers = tuple(influencers)

    @property
    def stocks(self) -> Sequence[Stock]:
        return self._stocks

    @property
    def cryptocurrencies(self) -> Sequence[Crypto]:
        return self._cryptocurrencies

    @property
    def news(self) -> Sequence[NewsItem]:
        return self._news

    @property
    def global_alerts(self) -> Sequence[GlobalAlert]:
        return self._global_alerts

    @property
    def events(self) -> Sequence[MarketEvent]:
        return self._events

    @property
    def insights(self) -> Sequence[Insight]:
        return self._insights

    @property
    def influencers(self) -> Sequence[Influencer]:
        return self._influencers

    @classmethod
    def from_seed(
        cls,
        now: Optional[datetime] = None,
        seed: int = 42,
    ) -> "StaticMarketDataSource":
        """
        Build the demo data set.

        Args:
            now: Reference time for relative timestamps (default: current UTC)
            seed: Random seed for reproducible price history

        Returns:
            Populated StaticMarketDataSource
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.replace(microsecond=0)
        rng = random.Random(seed)

        def at(offset_seconds: int) -> datetime:
            return now + timedelta(seconds=offset_seconds)

        stocks = [
            Stock(sector=raw["sector"], **_asset_fields(raw, now, rng, at))
            for raw in seed_data.STOCKS
        ]
        cryptocurrencies = [
            Crypto(**_asset_fields(raw, now, rng, at))
            for raw in seed_data.CRYPTOCURRENCIES
        ]
        news = [
            NewsItem(timestamp=at(raw["offset"]), **_without(raw, "offset"))
            for raw in seed_data.NEWS
        ]
        global_alerts = [
            GlobalAlert(timestamp=at(raw["offset"]), **_without(raw, "offset"))
            for raw in seed_data.GLOBAL_ALERTS
        ]
        events = []
        for raw in seed_data.EVENTS:
            confidence, move, magnitude = raw["prediction"]
            events.append(
                MarketEvent(
                    scheduled_time=at(raw["offset"]),
                    ai_core_prediction=EventPrediction(
                        confidence=confidence,
                        predicted_move=move,
                        magnitude=magnitude,
                    ),
                    **_without(raw, "offset", "prediction"),
                )
            )
        insights = [
            Insight(timestamp=at(raw["offset"]), **_without(raw, "offset"))
            for raw in seed_data.INSIGHTS
        ]
        influencers = [
            Influencer(
                recent_predictions=[
                    InfluencerPrediction(
                        id=pid,
                        asset=asset,
                        prediction=call,
                        confidence=confidence,
                        timestamp=at(offset),
                        target_price=target,
                        timeframe=timeframe,
                    )
                    for pid, asset, call, confidence, offset, target, timeframe
                    in raw["predictions"]
                ],
                **_without(raw, "predictions"),
            )
            for raw in seed_data.INFLUENCERS
        ]

        source = cls(
            stocks=stocks,
            cryptocurrencies=cryptocurrencies,
            news=news,
            global_alerts=global_alerts,
            events=events,
            insights=insights,
            influencers=influencers,
        )
        logger.info(
            f"Loaded seed data: {len(stocks)} stocks, {len(cryptocurrencies)} crypto, "
            f"{len(news)} news, {len(events)} events"
        )
        return source


def _without(raw: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    return {k: v for k, v in raw.items() if k not in keys}


def _asset_fields(
    raw: Dict[str, Any],
    now: datetime,
    rng: random.Random,
    at,
) -> Dict[str, Any]:
    """Shared Stock/Crypto fields from a seed entry."""
    overall, technical, fundamental, social = raw["sentiment"]
    return {
        "id": raw["id"],
        "symbol": raw["symbol"],
        "name": raw["name"],
        "current_price": raw["current_price"],
        "change_percent": raw["change_percent"],
        "change_amount": raw["change_amount"],
        "volume": raw["volume"],
        "market_cap": raw["market_cap"],
        "price_history": _price_history(raw["profile"], now, rng),
        "alerts": [
            EmbeddedAlert(
                id=alert_id,
                type=kind,
                severity=severity,
                message=message,
                timestamp=at(offset),
                impact=impact,
            )
            for alert_id, kind, severity, message, offset, impact in raw["alerts"]
        ],
        "sentiment": Sentiment(
            overall=overall,
            technical=technical,
            fundamental=fundamental,
            social=social,
        ),
        "key_metrics": raw["key_metrics"],
    }


def _price_history(
    profile: Tuple[float, float, float, float, int, int],
    now: datetime,
    rng: random.Random,
) -> List[PricePoint]:
    """Generate one point per day for the last HISTORY_DAYS days, oldest first."""
    base, spread, amplitude, period, volume_base, volume_spread = profile
    points = []
    for idx, days_ago in enumerate(range(seed_data.HISTORY_DAYS, -1, -1)):
        price = base + rng.random() * spread + math.sin(idx / period) * amplitude
        points.append(
            PricePoint(
                timestamp=now - timedelta(days=days_ago),
                price=round(price, 2),
                volume=volume_base + rng.randrange(volume_spread),
            )
        )
    return points
