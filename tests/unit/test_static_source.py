"""
Unit Tests for StaticMarketDataSource.

Test Aspects Covered:
    ✅ Business Logic: Seed collections and relative timestamps
    ✅ Determinism: Same seed gives the same price history
    ✅ Invariants: Collections are immutable
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pulse_query.adapters.static_source import StaticMarketDataSource
from pulse_query.interfaces.market_data_source import MarketDataSource


class TestSeedData:
    """Tests for from_seed()."""

    def test_collection_sizes(self, seed_source) -> None:
        assert [s.symbol for s in seed_source.stocks] == ["AAPL", "TSLA", "NVDA", "MSFT", "GOOGL"]
        assert [c.symbol for c in seed_source.cryptocurrencies] == ["BTC", "ETH", "SOL"]
        assert len(seed_source.news) == 8
        assert len(seed_source.global_alerts) == 3
        assert len(seed_source.events) == 4
        assert len(seed_source.insights) == 3
        assert len(seed_source.influencers) == 3

    def test_satisfies_protocol(self, seed_source) -> None:
        assert isinstance(seed_source, MarketDataSource)

    def test_collections_are_tuples(self, seed_source) -> None:
        assert isinstance(seed_source.stocks, tuple)
        assert isinstance(seed_source.news, tuple)

    def test_timestamps_relative_to_now(self, seed_source, fixed_now) -> None:
        """
        SCENARIO: Seed built at a fixed reference time
        EXPECTED: Past news, future events
        """
        news = {n.id: n for n in seed_source.news}
        events = {e.id: e for e in seed_source.events}

        assert news["news_4"].timestamp == fixed_now - timedelta(minutes=30)
        assert events["event_1"].scheduled_time == fixed_now + timedelta(days=5)
        assert all(e.scheduled_time > fixed_now for e in seed_source.events)

    def test_price_history_covers_thirty_days(self, seed_source, fixed_now) -> None:
        history = seed_source.stocks[0].price_history

        assert len(history) == 31
        assert history[0].timestamp == fixed_now - timedelta(days=30)
        assert history[-1].timestamp == fixed_now
        assert all(p.price > 0 and p.volume > 0 for p in history)

    def test_same_seed_same_history(self, fixed_now) -> None:
        first = StaticMarketDataSource.from_seed(now=fixed_now, seed=7)
        second = StaticMarketDataSource.from_seed(now=fixed_now, seed=7)

        assert first.stocks[2].price_history == second.stocks[2].price_history

    def test_naive_now_taken_as_utc(self) -> None:
        source = StaticMarketDataSource.from_seed(now=datetime(2024, 6, 1, 12))

        assert source.insights[0].timestamp.tzinfo == timezone.utc

    def test_crypto_metrics_allow_nulls(self, seed_source) -> None:
        eth = seed_source.cryptocurrencies[1]

        assert eth.key_metrics["maxSupply"] is None
        assert eth.to_record()["assetType"] == "crypto"


class TestEmptySource:
    """Tests for an explicitly constructed source."""

    def test_defaults_to_empty_collections(self) -> None:
        source = StaticMarketDataSource()

        assert source.stocks == ()
        assert source.influencers == ()
