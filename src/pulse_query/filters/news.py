"""
News Predicates.

Filters news items by category, impact, affected asset, sentiment range
and free-text search over title, summary and source.
"""

from __future__ import annotations

from pulse_query.query.predicates import (
    Criterion,
    PredicateSet,
    exact_match,
    max_bound,
    membership,
    min_bound,
    substring_search,
)

NEWS_FILTERS = (
    "category",
    "impact",
    "asset",
    "search",
    "minSentiment",
    "maxSentiment",
)


def news_predicates() -> PredicateSet:
    """Build the predicate set for news listings."""
    return PredicateSet(
        "news",
        [
            Criterion("category", exact_match("category")),
            Criterion("impact", exact_match("impact")),
            Criterion("asset", membership(list_fields=("affectedAssets",))),
            Criterion("search", substring_search(("title", "summary", "source"))),
            Criterion("minSentiment", min_bound("sentiment")),
            Criterion("maxSentiment", max_bound("sentiment")),
        ],
    )
