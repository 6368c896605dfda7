"""
Comparator - Type-Aware Ordering of Record Field Values.

Rules, in order of precedence:
    1. Dotted paths walk nested mappings. Missing keys (and null values)
       are absent: two absent values tie, absent sorts below present.
    2. Two timestamps (date/datetime objects or ISO-8601 strings)
       compare chronologically, before any string comparison.
    3. Two numbers (booleans excluded) compare numerically.
    4. Two strings use a locale-style collation: accent- and
       case-insensitive first, exact text as tie-breaker.
    5. Anything else ties (0) in both directions.

Descending order negates the computed result, so rule 5 stays 0 and
the stable sort keeps the input order for incomparable pairs.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import date, datetime, time, timezone
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from pulse_query.domain.value_objects import Record, SortDirection

# Sentinel for a path that does not resolve
MISSING = object()

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def resolve_path(record: Any, path: str) -> Any:
    """
    Resolve a possibly dotted field path against a record.

    Args:
        record: Mapping to read from
        path: Field name or dot-path (e.g. ``sentiment.overall``)

    Returns:
        The value, or ``MISSING`` if any segment is absent
    """
    value = record
    for key in path.split("."):
        if not hasattr(value, "get"):
            return MISSING
        value = value.get(key, MISSING)
        if value is MISSING:
            return MISSING
    return value


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Interpret a value as an instant, if it is one.

    Naive values are taken as UTC so that every parsed instant is
    comparable with every other.

    Returns:
        Timezone-aware datetime, or None if the value is not a timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and _ISO_DATE_PREFIX.match(value):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_absent(value: Any) -> bool:
    return value is MISSING or value is None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _collation_key(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def compare_strings(a: str, b: str) -> int:
    """Locale-style string comparison returning -1, 0 or 1."""
    primary = _sign(_collation_key(a), _collation_key(b))
    if primary:
        return primary
    # lowercase before uppercase on otherwise equal text
    return _sign(a.swapcase(), b.swapcase())


def compare_values(
    a: Any,
    b: Any,
    direction: SortDirection = SortDirection.ASC,
) -> int:
    """
    Compare two resolved field values.

    Args:
        a: Left value (may be ``MISSING``)
        b: Right value (may be ``MISSING``)
        direction: Sort direction

    Returns:
        -1, 0 or 1
    """
    a_absent = _is_absent(a)
    b_absent = _is_absent(b)

    if a_absent and b_absent:
        return 0
    if a_absent or b_absent:
        result = -1 if a_absent else 1
    else:
        a_time = parse_timestamp(a)
        b_time = parse_timestamp(b)
        if a_time is not None and b_time is not None:
            result = _sign(a_time, b_time)
        elif _is_number(a) and _is_number(b):
            result = _sign(a, b)
        elif isinstance(a, str) and isinstance(b, str):
            result = compare_strings(a, b)
        else:
            return 0

    return -result if direction == SortDirection.DESC else result


def compare_records(
    a: Record,
    b: Record,
    field: str,
    direction: SortDirection = SortDirection.ASC,
) -> int:
    """Compare two records by a (possibly dotted) field."""
    return compare_values(resolve_path(a, field), resolve_path(b, field), direction)


def sort_records(
    records: Sequence[Record],
    field: str,
    direction: SortDirection = SortDirection.ASC,
) -> List[Record]:
    """
    Stable sort of records by one field.

    Returns a new list; the input sequence is left untouched.
    """
    keyed = [(resolve_path(record, field), record) for record in records]
    keyed.sort(key=cmp_to_key(lambda x, y: compare_values(x[0], y[0], direction)))
    return [record for _, record in keyed]
