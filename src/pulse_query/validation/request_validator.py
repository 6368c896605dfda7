"""
Request Validator - Parse and Validate Raw Query Parameters.

Turns the raw string parameters of a request into a ListQuery before
any service runs:
    - page is a positive integer
    - limit is an integer within [1, max_page_size]
    - order is asc or desc (case-insensitive)
    - enumerated filters hold a known value
    - symbols are 1-10 characters
    - date ranges are ISO-8601 with start <= end

Design Notes:
    - Fail-fast principle
    - Clear error messages
    - Filters not allowed for the endpoint are dropped, not rejected
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from pulse_query.config.models import QueryConfig
from pulse_query.domain.value_objects import ListQuery, PageRequest, SortDirection, SortSpec

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when request validation fails."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def _present(value: Any) -> bool:
    return value is not None and str(value) != ""


class RequestValidator:
    """
    Validates raw request parameters.

    Validates:
        - Pagination parameters (page, limit, order)
        - Enumerated filter values (category, impact, severity, assetType)
        - Path parameters (symbols, dates)
    """

    ENUMERATIONS: Dict[str, Tuple[str, ...]] = {
        "category": ("macro", "technology", "crypto", "earnings", "regulatory", "market"),
        "impact": ("low", "medium", "high", "critical"),
        "severity": ("low", "medium", "high", "critical"),
        "assetType": ("stock", "crypto", "global", "all"),
    }

    MAX_SYMBOL_LENGTH = 10

    def __init__(self, config: Optional[QueryConfig] = None) -> None:
        """
        Initialize request validator.

        Args:
            config: Query configuration (page size bound)
        """
        self.config = config or QueryConfig()

    @property
    def max_page_size(self) -> int:
        return self.config.pagination.max_page_size

    def parse_list_query(
        self,
        params: Mapping[str, Any],
        allowed_filters: Iterable[str],
        allow_sort: bool = True,
    ) -> ListQuery:
        """
        Build a ListQuery from raw parameters.

        Args:
            params: Raw query parameters
            allowed_filters: Filter names the endpoint accepts
            allow_sort: Whether sort/order parameters are honored

        Returns:
            Validated ListQuery

        Raises:
            ValidationError: If a parameter is malformed
        """
        page = self._parse_page(params.get("page"))
        limit = self._parse_limit(params.get("limit"))

        sort = None
        if allow_sort:
            direction = self._parse_order(params.get("order"))
            if _present(params.get("sort")):
                sort = SortSpec(field=str(params["sort"]), direction=direction)

        filters: Dict[str, Any] = {}
        for name in allowed_filters:
            value = params.get(name)
            if not _present(value):
                continue
            if name in self.ENUMERATIONS:
                self.validate_enum(name, value)
            filters[name] = value

        page_request = None
        if page is not None and limit is not None:
            page_request = PageRequest(page=page, page_size=limit)

        logger.debug(
            f"Parsed list query: filters={sorted(filters)}, sort={sort}, page={page_request}"
        )
        return ListQuery(filters=filters, sort=sort, page=page_request)

    def validate_enum(self, name: str, value: Any) -> str:
        """
        Check an enumerated value.

        Returns:
            Lower-cased value

        Raises:
            ValidationError: If the value is not one of the allowed ones
        """
        allowed = self.ENUMERATIONS[name]
        normalized = str(value).lower()
        if normalized not in allowed:
            raise ValidationError(
                f"Invalid {name}. Must be one of: {', '.join(allowed)}", field=name
            )
        return normalized

    def validate_symbol(self, symbol: Optional[str]) -> str:
        """
        Check symbol length.

        Raises:
            ValidationError: If the symbol is empty or too long
        """
        if not symbol or len(symbol) > self.MAX_SYMBOL_LENGTH:
            raise ValidationError("Invalid symbol format", field="symbol")
        return symbol

    def parse_date_range(
        self,
        start: Optional[str],
        end: Optional[str],
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        """
        Parse optional ISO-8601 bounds.

        Returns:
            (start, end) as aware datetimes; None for absent bounds

        Raises:
            ValidationError: If a bound is malformed or start > end
        """
        start_at = self._parse_date(start, "startDate")
        end_at = self._parse_date(end, "endDate")
        if start_at is not None and end_at is not None and start_at > end_at:
            raise ValidationError("startDate must be before endDate", field="startDate")
        return start_at, end_at

    def _parse_page(self, value: Any) -> Optional[int]:
        if not _present(value):
            return None
        number = _parse_int(value)
        if number is None or number < 1:
            raise ValidationError("Page must be a positive integer", field="page")
        return number

    def _parse_limit(self, value: Any) -> Optional[int]:
        if not _present(value):
            return None
        number = _parse_int(value)
        if number is None or not (1 <= number <= self.max_page_size):
            raise ValidationError(
                f"Limit must be between 1 and {self.max_page_size}", field="limit"
            )
        return number

    def _parse_order(self, value: Any) -> Optional[SortDirection]:
        if not _present(value):
            return None
        try:
            return SortDirection(str(value).lower())
        except ValueError:
            raise ValidationError(
                'Order must be either "asc" or "desc"', field="order"
            ) from None

    def _parse_date(self, value: Optional[str], field: str) -> Optional[datetime]:
        if not _present(value):
            return None
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(
                f"Invalid {field} format. Use ISO 8601 format", field=field
            ) from None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None
