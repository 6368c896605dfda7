"""
Query Package - The Shared Listing Engine.

Components:
    - comparator: Type-aware value ordering and stable record sorting
    - predicates: Predicate families and per-resource PredicateSet
    - pagination: Page slicing and page metadata
    - pipeline: QueryPipeline orchestrating filter -> sort -> paginate

Design Principles:
    - Pure functions of (records, filters, sort, page)
    - Inputs never mutated
    - Odd input degrades to "no match" or "no reorder", never raises
"""

from pulse_query.query.comparator import (
    MISSING,
    compare_records,
    compare_values,
    parse_timestamp,
    resolve_path,
    sort_records,
)
from pulse_query.query.pagination import paginate
from pulse_query.query.pipeline import QueryPipeline
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

__all__ = [
    "MISSING",
    "compare_records",
    "compare_values",
    "parse_timestamp",
    "resolve_path",
    "sort_records",
    "paginate",
    "QueryPipeline",
    "Criterion",
    "PredicateSet",
    "boolean_equals",
    "exact_match",
    "is_absent",
    "max_bound",
    "membership",
    "min_bound",
    "substring_search",
]
