"""
Unit Tests for QueryPipeline.

Test Aspects Covered:
    ✅ Business Logic: Filter -> sort -> paginate ordering
    ✅ Configuration: Default sort, explicit order, aliases, sortable set
    ✅ Observability: Metrics recorded per resource
    ✅ Edge Cases: Empty results, unsortable fields
"""

from __future__ import annotations

import pytest

from pulse_query.adapters.metrics_collector import InMemoryMetricsCollector
from pulse_query.config.models import ResourceQueryConfig
from pulse_query.domain.value_objects import PageRequest, SortDirection, SortSpec
from pulse_query.filters import asset_predicates, influencer_predicates, news_predicates
from pulse_query.query.pipeline import QueryPipeline


def _news(id_: str, timestamp: str, sentiment: float) -> dict:
    return {"id": id_, "timestamp": timestamp, "sentiment": sentiment, "title": id_}


@pytest.fixture
def news_records():
    return [
        _news("old", "2024-05-01T10:00:00Z", 0.3),
        _news("new", "2024-05-03T10:00:00Z", 0.9),
        _news("mid", "2024-05-02T10:00:00Z", 0.6),
    ]


@pytest.fixture
def news_pipeline() -> QueryPipeline:
    return QueryPipeline.from_config(
        news_predicates(),
        ResourceQueryConfig(
            default_sort="timestamp",
            default_order=SortDirection.DESC,
            explicit_sort_order=SortDirection.DESC,
            sortable_fields=["timestamp", "sentiment", "title"],
        ),
    )


class TestQueryPipelineFiltering:
    """Tests for the filter stage."""

    def test_filter_sort_scenario(self, five_assets) -> None:
        """
        SCENARIO: minChangePercent=0, sort changePercent desc
        EXPECTED: [3.45, 2.34, 0.89]
        """
        # Arrange
        pipeline = QueryPipeline(asset_predicates())

        # Act
        result = pipeline.run(
            five_assets,
            {"minChangePercent": "0"},
            SortSpec(field="changePercent", direction=SortDirection.DESC),
        )

        # Assert
        assert [r["changePercent"] for r in result.data] == [3.45, 2.34, 0.89]
        assert result.pagination is None

    def test_no_match_is_empty_not_error(self, five_assets) -> None:
        pipeline = QueryPipeline(asset_predicates())

        result = pipeline.run(five_assets, {"minPrice": "100000"})

        assert result.data == []
        assert result.count == 0

    def test_input_sequence_is_untouched(self, five_assets) -> None:
        snapshot = [dict(r) for r in five_assets]
        pipeline = QueryPipeline(asset_predicates())

        pipeline.run(five_assets, {"minChangePercent": "0"}, SortSpec(field="changePercent"))

        assert five_assets == snapshot


class TestQueryPipelineSorting:
    """Tests for sort resolution."""

    def test_default_sort_without_request(self, news_pipeline, news_records) -> None:
        result = news_pipeline.run(news_records)

        assert [r["id"] for r in result.data] == ["new", "mid", "old"]

    def test_requested_field_uses_explicit_order(self, news_pipeline, news_records) -> None:
        """
        SCENARIO: Sort field given without order on a resource whose explicit sorts run desc
        EXPECTED: Descending by the requested field
        """
        result = news_pipeline.run(news_records, sort=SortSpec(field="sentiment"))

        assert [r["sentiment"] for r in result.data] == [0.9, 0.6, 0.3]

    def test_requested_order_wins(self, news_pipeline, news_records) -> None:
        result = news_pipeline.run(
            news_records, sort=SortSpec(field="timestamp", direction=SortDirection.ASC)
        )

        assert [r["id"] for r in result.data] == ["old", "mid", "new"]

    def test_unsortable_field_keeps_filter_order(self, news_pipeline, news_records) -> None:
        result = news_pipeline.run(news_records, sort=SortSpec(field="secret"))

        assert [r["id"] for r in result.data] == ["old", "new", "mid"]

    def test_no_default_keeps_input_order(self, five_assets) -> None:
        pipeline = QueryPipeline(asset_predicates())

        result = pipeline.run(five_assets)

        assert [r["symbol"] for r in result.data] == ["AAPL", "TSLA", "NVDA", "MSFT", "GOOGL"]

    def test_sort_alias_maps_to_field(self) -> None:
        pipeline = QueryPipeline.from_config(
            influencer_predicates(),
            ResourceQueryConfig(
                explicit_sort_order=SortDirection.DESC,
                sortable_fields=["credibilityScore"],
                sort_aliases={"credibility": "credibilityScore"},
            ),
        )
        records = [
            {"id": "b", "credibilityScore": 0.5},
            {"id": "a", "credibilityScore": 0.9},
        ]

        result = pipeline.run(records, sort=SortSpec(field="credibility"))

        assert [r["id"] for r in result.data] == ["a", "b"]

    def test_resolve_sort_returns_none_without_default(self) -> None:
        assert QueryPipeline(asset_predicates()).resolve_sort(None) is None


class TestQueryPipelinePagination:
    """Tests for the paginate stage."""

    def test_paginates_after_sorting(self, news_pipeline, news_records) -> None:
        """
        SCENARIO: Page size smaller than the result
        EXPECTED: Sort sees the whole set before slicing
        """
        result = news_pipeline.run(news_records, page=PageRequest(page=2, page_size=2))

        assert [r["id"] for r in result.data] == ["old"]
        assert result.pagination.total_items == 3
        assert result.pagination.total_pages == 2

    def test_total_items_counts_filtered_set(self, five_assets) -> None:
        pipeline = QueryPipeline(asset_predicates())

        result = pipeline.run(
            five_assets, {"minChangePercent": "0"}, page=PageRequest(page=1, page_size=1)
        )

        assert result.pagination.total_items == 3
        assert result.count == 1


class TestQueryPipelineMetrics:
    """Tests for metrics emission."""

    def test_records_timing_and_count(self, five_assets) -> None:
        # Arrange
        collector = InMemoryMetricsCollector()
        pipeline = QueryPipeline(asset_predicates(), metrics_collector=collector)

        # Act
        pipeline.run(five_assets, {"minChangePercent": "0"})

        # Assert
        metrics = collector.get_metrics()
        assert metrics["query_duration_seconds"]["count"] == 1
        assert metrics["records_matched_total"]["last"] == 3
        entries = collector.get_entries("records_matched_total", {"resource": "assets"})
        assert len(entries) == 1

    def test_no_collector_is_fine(self, five_assets) -> None:
        QueryPipeline(asset_predicates()).run(five_assets)
