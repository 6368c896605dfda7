"""
Predicates - Independent Filter Tests and Their Conjunction.

A predicate tests one record against one raw filter value. Predicates
never raise on odd input: a record without the field, a non-numeric
value or an unparseable bound simply does not match.

Predicate families:
    - exact_match: case-insensitive equality, optional wildcard
    - min_bound / max_bound: inclusive numeric range bounds
    - membership: identifier, list membership or market-wide sentinel
    - substring_search: case-insensitive search over text fields
    - boolean_equals: "true"/"false" coerced to bool

A PredicateSet names the criteria one resource kind understands and
evaluates the present ones as a logical AND.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from pulse_query.domain.value_objects import FilterCriteria, Record

logger = logging.getLogger(__name__)

Predicate = Callable[[Record, Any], bool]


def is_absent(value: Any) -> bool:
    """A filter value of None or an empty string means 'no filter'."""
    return value is None or (isinstance(value, str) and value == "")


def _as_number(value: Any) -> Optional[float]:
    """Coerce a filter bound to float, None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _record_number(record: Record, field: str) -> Optional[float]:
    value = record.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def exact_match(field: str, wildcard: Optional[str] = None) -> Predicate:
    """Case-insensitive equality on a string field."""

    def predicate(record: Record, value: Any) -> bool:
        expected = str(value).lower()
        if wildcard is not None and expected == wildcard.lower():
            return True
        actual = record.get(field)
        return isinstance(actual, str) and actual.lower() == expected

    return predicate


def min_bound(field: str) -> Predicate:
    """Passes when ``record[field] >= value``."""

    def predicate(record: Record, value: Any) -> bool:
        bound = _as_number(value)
        actual = _record_number(record, field)
        return bound is not None and actual is not None and actual >= bound

    return predicate


def max_bound(field: str) -> Predicate:
    """Passes when ``record[field] <= value``."""

    def predicate(record: Record, value: Any) -> bool:
        bound = _as_number(value)
        actual = _record_number(record, field)
        return bound is not None and actual is not None and actual <= bound

    return predicate


def membership(
    identity_fields: Sequence[str] = (),
    list_fields: Sequence[str] = (),
    scope_field: Optional[str] = None,
    sentinel: Optional[str] = None,
) -> Predicate:
    """
    Asset membership test.

    The upper-cased token passes a record when it equals one of the
    identity fields, appears in one of the list fields, or when the
    record's scope field holds the sentinel (applies to every asset).
    """

    def predicate(record: Record, value: Any) -> bool:
        token = str(value).upper()
        for field in identity_fields:
            if record.get(field) == token:
                return True
        for field in list_fields:
            items = record.get(field)
            if isinstance(items, (list, tuple)) and token in items:
                return True
        if scope_field is not None and sentinel is not None:
            return record.get(scope_field) == sentinel
        return False

    return predicate


def substring_search(fields: Sequence[str]) -> Predicate:
    """Case-insensitive substring match against any of the fields."""

    def predicate(record: Record, value: Any) -> bool:
        term = str(value).lower()
        for field in fields:
            text = record.get(field)
            if isinstance(text, str) and term in text.lower():
                return True
        return False

    return predicate


def boolean_equals(field: str) -> Predicate:
    """Equality on a boolean field; only ``"true"`` coerces to True."""

    def predicate(record: Record, value: Any) -> bool:
        if isinstance(value, bool):
            expected = value
        else:
            expected = str(value).strip().lower() == "true"
        actual = record.get(field)
        return isinstance(actual, bool) and actual == expected

    return predicate


@dataclass(frozen=True)
class Criterion:
    """A named filter criterion: filter field name plus its predicate."""

    name: str
    predicate: Predicate
    description: str = ""

    def matches(self, record: Record, value: Any) -> bool:
        return self.predicate(record, value)


class PredicateSet:
    """
    The filter criteria understood by one resource kind.

    Filter values for unknown names are ignored; absent values skip
    their criterion. Present criteria are combined with AND.
    """

    def __init__(self, name: str, criteria: Iterable[Criterion]) -> None:
        """
        Initialize predicate set.

        Args:
            name: Resource kind this set belongs to
            criteria: Criteria in evaluation order

        Raises:
            ValueError: If two criteria share a name
        """
        self._name = name
        self._criteria: Dict[str, Criterion] = {}
        for criterion in criteria:
            if criterion.name in self._criteria:
                raise ValueError(f"Duplicate criterion '{criterion.name}' in {name}")
            self._criteria[criterion.name] = criterion

    @property
    def name(self) -> str:
        return self._name

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self._criteria)

    def criterion(self, name: str) -> Optional[Criterion]:
        return self._criteria.get(name)

    def active(self, filters: Optional[FilterCriteria]) -> List[Tuple[Criterion, Any]]:
        """Criteria that have a present value in ``filters``."""
        if not filters:
            return []
        return [
            (criterion, filters[name])
            for name, criterion in self._criteria.items()
            if name in filters and not is_absent(filters[name])
        ]

    def has_active(self, filters: Optional[FilterCriteria]) -> bool:
        return bool(self.active(filters))

    def matches(self, record: Record, filters: Optional[FilterCriteria]) -> bool:
        return all(c.matches(record, value) for c, value in self.active(filters))

    def apply(
        self,
        records: Sequence[Record],
        filters: Optional[FilterCriteria],
    ) -> List[Record]:
        """
        Narrow records to those satisfying every present criterion.

        Returns:
            New list in input order; a copy of the input when no
            criterion is present
        """
        active = self.active(filters)
        if not active:
            return list(records)

        passed = [
            record
            for record in records
            if all(c.matches(record, value) for c, value in active)
        ]
        logger.debug(
            f"{self._name}: {len(records)} -> {len(passed)} records "
            f"(criteria: {[c.name for c, _ in active]})"
        )
        return passed
