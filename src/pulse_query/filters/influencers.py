"""
Influencer Predicates.
"""

from __future__ import annotations

from pulse_query.query.predicates import Criterion, PredicateSet, exact_match, min_bound

INFLUENCER_FILTERS = ("platform", "minCredibility")


def influencer_predicates() -> PredicateSet:
    """Build the predicate set for influencer listings."""
    return PredicateSet(
        "influencers",
        [
            Criterion("platform", exact_match("platform")),
            Criterion("minCredibility", min_bound("credibilityScore")),
        ],
    )
