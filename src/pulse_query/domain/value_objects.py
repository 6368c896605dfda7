"""
Value Objects for Domain Layer.

Query parameters and query results. Value objects are immutable and
carry no identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from pulse_query.domain.entities import to_camel


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# One queried item in its JSON form (camelCase keys)
Record = Mapping[str, Any]

# Filter field name -> raw filter value
FilterCriteria = Mapping[str, Any]


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Sort field (dot-path for nested fields) and optional direction."""

    field: str
    direction: Optional[SortDirection] = None

    model_config = {"frozen": True}


class PageRequest(BaseModel):
    """1-based page number and page size."""

    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1, le=100)

    model_config = {"frozen": True}


class ListQuery(BaseModel):
    """Everything a listing operation needs besides the records."""

    filters: Dict[str, Any] = Field(default_factory=dict)
    sort: Optional[SortSpec] = None
    page: Optional[PageRequest] = None

    model_config = {"frozen": True}


class PaginationMeta(BaseModel):
    """Page metadata emitted alongside a paginated slice."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PageResult(BaseModel):
    """Records returned by a listing plus optional page metadata."""

    data: List[Dict[str, Any]] = Field(default_factory=list)
    pagination: Optional[PaginationMeta] = None

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.data)

    def to_response(self) -> Dict[str, Any]:
        """Build the JSON envelope; ``pagination`` only when paginated."""
        body: Dict[str, Any] = {"success": True, "count": self.count}
        if self.pagination is not None:
            body["pagination"] = self.pagination.model_dump(by_alias=True)
        body["data"] = list(self.data)
        return body
