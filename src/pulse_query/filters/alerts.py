"""
Alert Predicates.

Filters the merged alert collection. An alert belongs to an asset when
the asset owns it (``assetId``) or is listed in ``affectedAssets``.
"""

from __future__ import annotations

from pulse_query.query.predicates import (
    Criterion,
    PredicateSet,
    boolean_equals,
    exact_match,
    membership,
)

ALERT_FILTERS = (
    "severity",
    "asset",
    "type",
    "assetType",
    "actionRequired",
)


def alert_predicates() -> PredicateSet:
    """Build the predicate set for alert listings."""
    return PredicateSet(
        "alerts",
        [
            Criterion("severity", exact_match("severity")),
            Criterion(
                "asset",
                membership(identity_fields=("assetId",), list_fields=("affectedAssets",)),
            ),
            Criterion("type", exact_match("type")),
            Criterion("assetType", exact_match("assetType", wildcard="all")),
            Criterion("actionRequired", boolean_equals("actionRequired")),
        ],
    )
