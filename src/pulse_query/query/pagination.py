"""
Pagination Envelope - Page Slicing and Metadata.

Page number and page size are expected to be validated already
(page >= 1, 1 <= page_size <= 100). Out-of-range pages produce an
empty slice, never an error.
"""

from __future__ import annotations

import math
from typing import Sequence

from pulse_query.domain.value_objects import PageResult, PaginationMeta, Record


def paginate(records: Sequence[Record], page: int, page_size: int) -> PageResult:
    """
    Slice one page out of records and compute page metadata.

    Args:
        records: Full filtered and sorted record sequence
        page: 1-based page number
        page_size: Items per page

    Returns:
        PageResult with the page's records and metadata
    """
    total_items = len(records)
    start_index = (page - 1) * page_size
    end_index = page * page_size

    return PageResult(
        data=list(records[start_index:end_index]),
        pagination=PaginationMeta(
            current_page=page,
            total_pages=math.ceil(total_items / page_size),
            total_items=total_items,
            items_per_page=page_size,
            has_next_page=end_index < total_items,
            has_prev_page=page > 1,
        ),
    )
