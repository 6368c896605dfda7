"""
AI Insight Predicates.
"""

from __future__ import annotations

from pulse_query.query.predicates import (
    Criterion,
    PredicateSet,
    boolean_equals,
    exact_match,
    membership,
    min_bound,
)

INSIGHT_FILTERS = ("asset", "type", "actionable", "minConfidence")


def insight_predicates(sentinel: str = "market_wide") -> PredicateSet:
    """Build the predicate set for insight listings."""
    return PredicateSet(
        "insights",
        [
            Criterion(
                "asset",
                membership(identity_fields=("asset",), scope_field="asset", sentinel=sentinel),
            ),
            Criterion("type", exact_match("type")),
            Criterion("actionable", boolean_equals("actionable")),
            Criterion("minConfidence", min_bound("confidence")),
        ],
    )
