"""
Unit Tests for Predicates and PredicateSet.

Test Aspects Covered:
    ✅ Business Logic: Each predicate family in isolation
    ✅ Error Handling: Odd inputs never raise, they just fail to match
    ✅ Invariants: Conjunction, narrowing, unknown filters ignored
"""

from __future__ import annotations

import pytest

from pulse_query.query.predicates import (
    Criterion,
    PredicateSet,
    boolean_equals,
    exact_match,
    is_absent,
    max_bound,
    membership,
    min_bound,
    substring_search,
)


class TestIsAbsent:
    """Tests for absent filter values."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_values(self, value) -> None:
        assert is_absent(value) is True

    @pytest.mark.parametrize("value", ["0", 0, False, "all", " "])
    def test_present_values(self, value) -> None:
        assert is_absent(value) is False


class TestExactMatch:
    """Tests for case-insensitive equality."""

    def test_matches_ignoring_case(self) -> None:
        predicate = exact_match("severity")

        assert predicate({"severity": "High"}, "HIGH") is True
        assert predicate({"severity": "High"}, "low") is False

    def test_wildcard_passes_everything(self) -> None:
        predicate = exact_match("assetType", wildcard="all")

        assert predicate({"assetType": "stock"}, "ALL") is True
        assert predicate({}, "all") is True

    def test_missing_field_fails(self) -> None:
        assert exact_match("sector")({"symbol": "BTC"}, "technology") is False


class TestRangeBounds:
    """Tests for min/max bounds."""

    def test_bounds_are_inclusive(self) -> None:
        record = {"changePercent": 0.0}

        assert min_bound("changePercent")(record, "0") is True
        assert max_bound("changePercent")(record, 0) is True

    def test_min_and_max_exclude_outside_values(self) -> None:
        record = {"currentPrice": 150.0}

        assert min_bound("currentPrice")(record, "200") is False
        assert max_bound("currentPrice")(record, "100") is False

    @pytest.mark.parametrize("bound", ["abc", "nan", "", [1]])
    def test_unparseable_bound_fails(self, bound) -> None:
        """
        SCENARIO: Bound is not a number
        EXPECTED: No match, no exception
        """
        assert min_bound("volume")({"volume": 10}, bound) is False

    def test_non_numeric_record_value_fails(self) -> None:
        assert min_bound("volume")({"volume": "lots"}, "1") is False
        assert min_bound("volume")({}, "1") is False
        assert min_bound("flag")({"flag": True}, "0") is False


class TestMembership:
    """Tests for asset membership."""

    def test_identity_field_match_is_case_insensitive_on_token(self) -> None:
        predicate = membership(identity_fields=("assetId",))

        assert predicate({"assetId": "BTC"}, "btc") is True
        assert predicate({"assetId": "ETH"}, "btc") is False

    def test_list_field_membership(self) -> None:
        predicate = membership(list_fields=("affectedAssets",))

        assert predicate({"affectedAssets": ["BTC", "ETH"]}, "eth") is True
        assert predicate({"affectedAssets": ["BTC"]}, "sol") is False
        assert predicate({}, "sol") is False

    def test_sentinel_matches_any_token(self) -> None:
        """
        SCENARIO: Record scoped to the whole market
        EXPECTED: Passes for every asset token
        """
        predicate = membership(
            identity_fields=("asset",), scope_field="asset", sentinel="market_wide"
        )
        record = {"asset": "market_wide"}

        assert predicate(record, "AAPL") is True
        assert predicate(record, "doge") is True
        assert predicate({"asset": "NVDA"}, "AAPL") is False


class TestSubstringSearch:
    """Tests for free-text search."""

    def test_any_field_may_match(self) -> None:
        predicate = substring_search(("title", "summary"))
        record = {"title": "Tesla Reports Strong Q4 Deliveries", "summary": "Cars."}

        assert predicate(record, "tesla") is True
        assert predicate(record, "CARS") is True
        assert predicate(record, "bitcoin") is False

    def test_non_text_fields_are_skipped(self) -> None:
        assert substring_search(("name",))({"name": None}, "x") is False


class TestBooleanEquals:
    """Tests for boolean coercion."""

    def test_string_values_are_coerced(self) -> None:
        predicate = boolean_equals("actionable")

        assert predicate({"actionable": True}, "true") is True
        assert predicate({"actionable": True}, "TRUE") is True
        assert predicate({"actionable": False}, "false") is True
        assert predicate({"actionable": True}, "false") is False

    def test_bool_values_are_used_directly(self) -> None:
        assert boolean_equals("actionRequired")({"actionRequired": False}, False) is True

    def test_non_bool_record_value_fails(self) -> None:
        assert boolean_equals("actionRequired")({"actionRequired": "yes"}, "true") is False


class TestPredicateSet:
    """Tests for criteria combination."""

    @pytest.fixture
    def predicates(self) -> PredicateSet:
        return PredicateSet(
            "assets",
            [
                Criterion("minChangePercent", min_bound("changePercent")),
                Criterion("maxPrice", max_bound("currentPrice")),
                Criterion("search", substring_search(("name", "symbol"))),
            ],
        )

    def test_duplicate_criterion_raises(self) -> None:
        with pytest.raises(ValueError, match="Duplicate criterion"):
            PredicateSet("x", [Criterion("a", exact_match("a")), Criterion("a", exact_match("b"))])

    def test_field_names_in_order(self, predicates) -> None:
        assert predicates.field_names == ("minChangePercent", "maxPrice", "search")

    def test_no_filters_returns_copy(self, predicates, five_assets) -> None:
        result = predicates.apply(five_assets, {})

        assert result == five_assets
        assert result is not five_assets

    def test_unknown_and_absent_filters_are_ignored(self, predicates, five_assets) -> None:
        result = predicates.apply(five_assets, {"color": "red", "search": "", "maxPrice": None})

        assert result == five_assets
        assert predicates.has_active({"color": "red"}) is False

    def test_criteria_are_anded(self, predicates, five_assets) -> None:
        """
        SCENARIO: Two criteria present
        EXPECTED: Only records passing both are kept
        """
        # Act
        result = predicates.apply(five_assets, {"minChangePercent": "0", "maxPrice": "300"})

        # Assert
        assert [r["symbol"] for r in result] == ["AAPL"]

    def test_conjunction_equals_sequential_filtering(self, predicates, five_assets) -> None:
        both = predicates.apply(five_assets, {"minChangePercent": "0", "search": "corp"})
        sequential = predicates.apply(
            predicates.apply(five_assets, {"minChangePercent": "0"}), {"search": "corp"}
        )

        assert both == sequential
        assert [r["symbol"] for r in both] == ["NVDA", "MSFT"]

    def test_filtering_only_narrows(self, predicates, five_assets) -> None:
        result = predicates.apply(five_assets, {"minChangePercent": "-100"})

        assert len(result) <= len(five_assets)
        assert all(r in five_assets for r in result)

    def test_input_is_not_modified(self, predicates, five_assets) -> None:
        snapshot = list(five_assets)

        predicates.apply(five_assets, {"minChangePercent": "1"})

        assert five_assets == snapshot
