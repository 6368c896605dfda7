"""
Integration Test: Query Properties over the Seed Data.

Runs the registry's pipelines against the full seed collections and
checks the properties every listing must keep, whatever the resource.

Test Aspects Covered:
    ✅ Filter narrowing and conjunction on real records
    ✅ Sort stability in both directions
    ✅ Page coverage and out-of-range pages
    ✅ Market-wide scope matching any asset
"""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from pulse_query.domain.value_objects import ListQuery, PageRequest, SortDirection, SortSpec
from pulse_query.services import AlertService, NewsService
from pulse_query.services.base import to_records


@pytest.fixture
def news_records(seed_source) -> List[Dict[str, Any]]:
    return to_records(seed_source.news)


@pytest.fixture
def alert_records(seed_source, registry) -> List[Dict[str, Any]]:
    return to_records(AlertService(seed_source, registry).merged_alerts())


class TestFilterProperties:
    """Filtering never adds records and combines criteria with AND."""

    @pytest.mark.parametrize(
        "filters",
        [
            {"severity": "high"},
            {"assetType": "crypto"},
            {"asset": "BTC"},
            {"actionRequired": "true"},
            {"severity": "medium", "asset": "TSLA"},
        ],
    )
    def test_filter_narrows(self, registry, alert_records, filters) -> None:
        pipeline = registry.get_pipeline("alerts")

        result = pipeline.run(alert_records, filters)

        assert all(record in alert_records for record in result.data)
        for record in result.data:
            assert pipeline.predicates.matches(record, filters)

    def test_conjunction_equals_sequential_filtering(self, registry, news_records) -> None:
        """
        SCENARIO: {impact, asset} at once vs. impact then asset
        EXPECTED: Same records in the same order
        """
        # Arrange
        pipeline = registry.get_pipeline("news")

        # Act
        combined = pipeline.run(news_records, {"impact": "high", "asset": "ETH"})
        first = pipeline.run(news_records, {"impact": "high"})
        sequential = pipeline.run(first.data, {"asset": "ETH"})

        # Assert
        assert [r["id"] for r in combined.data] == [r["id"] for r in sequential.data]
        assert [r["id"] for r in combined.data] == ["news_7", "news_1"]


class TestSortProperties:
    """Sorting is stable and orders dates chronologically."""

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_equal_keys_keep_input_order(self, registry, alert_records, direction) -> None:
        pipeline = registry.get_pipeline("alerts")

        result = pipeline.run(alert_records, sort=SortSpec(field="severity", direction=direction))

        input_order = [r["id"] for r in alert_records]
        for severity in ("critical", "high", "medium", "low"):
            ids = [r["id"] for r in result.data if r["severity"] == severity]
            assert ids == [i for i in input_order if i in ids]

    def test_timestamps_sorted_chronologically(self, registry, news_records) -> None:
        pipeline = registry.get_pipeline("news")

        result = pipeline.run(
            news_records, sort=SortSpec(field="timestamp", direction=SortDirection.ASC)
        )

        stamps = [r["timestamp"] for r in result.data]
        assert result.data[-1]["id"] == "news_4"
        assert stamps == sorted(stamps)


class TestPaginationProperties:
    """Concatenated pages rebuild the full listing."""

    @pytest.mark.parametrize("page_size", [1, 3, 5, 17])
    def test_pages_cover_listing(self, seed_source, registry, page_size) -> None:
        # Arrange
        service = AlertService(seed_source, registry)
        full = service.list_alerts()

        # Act
        collected: List[Dict[str, Any]] = []
        page = 1
        while True:
            result = service.list_alerts(_page_query(page, page_size))
            collected.extend(result.data)
            if not result.pagination.has_next_page:
                break
            page += 1

        # Assert
        assert [r["id"] for r in collected] == [r["id"] for r in full.data]
        assert result.pagination.total_items == 17
        assert page == result.pagination.total_pages

    def test_page_beyond_range(self, seed_source, registry) -> None:
        result = NewsService(seed_source, registry).list_news(_page_query(4, 3))

        assert result.data == []
        assert result.pagination.has_next_page is False
        assert result.pagination.total_pages == 3


class TestScopeMembership:
    """Market-wide records apply to every asset."""

    @pytest.mark.parametrize("symbol", ["AAPL", "SOL", "DOGE"])
    def test_market_wide_event_matches_any_asset(self, registry, seed_source, symbol) -> None:
        pipeline = registry.get_pipeline("events")

        result = pipeline.run(to_records(seed_source.events), {"asset": symbol})

        assert "event_2" in [r["id"] for r in result.data]


def _page_query(page: int, page_size: int) -> ListQuery:
    return ListQuery(page=PageRequest(page=page, page_size=page_size))
