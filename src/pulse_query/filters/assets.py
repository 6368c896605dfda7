"""
Asset Predicates.

Filters stocks and cryptocurrencies by:
    - Asset type (stock / crypto / all)
    - Sector (stocks only carry one)
    - Price, daily change and volume ranges
    - Free-text search over name and symbol
"""

from __future__ import annotations

from pulse_query.query.predicates import (
    Criterion,
    PredicateSet,
    exact_match,
    max_bound,
    min_bound,
    substring_search,
)

ASSET_FILTERS = (
    "type",
    "sector",
    "minPrice",
    "maxPrice",
    "minChangePercent",
    "maxChangePercent",
    "minVolume",
    "maxVolume",
    "search",
)


def asset_predicates() -> PredicateSet:
    """Build the predicate set for asset listings."""
    return PredicateSet(
        "assets",
        [
            Criterion("type", exact_match("assetType", wildcard="all"), "stock, crypto or all"),
            Criterion("sector", exact_match("sector")),
            Criterion("minPrice", min_bound("currentPrice")),
            Criterion("maxPrice", max_bound("currentPrice")),
            Criterion("minChangePercent", min_bound("changePercent")),
            Criterion("maxChangePercent", max_bound("changePercent")),
            Criterion("minVolume", min_bound("volume")),
            Criterion("maxVolume", max_bound("volume")),
            Criterion("search", substring_search(("name", "symbol"))),
        ],
    )
