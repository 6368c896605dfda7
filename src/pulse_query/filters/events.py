"""
Market Event Predicates.

Events scoped to the market-wide sentinel match every asset filter.
"""

from __future__ import annotations

from pulse_query.query.predicates import Criterion, PredicateSet, exact_match, membership

EVENT_FILTERS = ("importance", "asset", "type")


def event_predicates(sentinel: str = "market_wide") -> PredicateSet:
    """Build the predicate set for event listings."""
    return PredicateSet(
        "events",
        [
            Criterion("importance", exact_match("importance")),
            Criterion(
                "asset",
                membership(identity_fields=("asset",), scope_field="asset", sentinel=sentinel),
            ),
            Criterion("type", exact_match("type")),
        ],
    )
