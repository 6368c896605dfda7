"""
Market Data Source Protocol.

Defines the read-only data access interface. Services receive a data
source through their constructor instead of reading process-wide
globals, so tests can supply controlled record sets.

The data source is responsible for:
    - Exposing each static collection as an immutable sequence
    - Never changing those collections after construction
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from pulse_query.domain.entities import (
        Crypto,
        GlobalAlert,
        Influencer,
        Insight,
        MarketEvent,
        NewsItem,
        Stock,
    )


@runtime_checkable
class MarketDataSource(Protocol):
    """Abstract interface for the served collections."""

    @property
    def stocks(self) -> Sequence["Stock"]:
        ...

    @property
    def cryptocurrencies(self) -> Sequence["Crypto"]:
        ...

    @property
    def news(self) -> Sequence["NewsItem"]:
        ...

    @property
    def global_alerts(self) -> Sequence["GlobalAlert"]:
        ...

    @property
    def events(self) -> Sequence["MarketEvent"]:
        ...

    @property
    def insights(self) -> Sequence["Insight"]:
        ...

    @property
    def influencers(self) -> Sequence["Influencer"]:
        ...
