"""
Deterministic pagination over a ranked list.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError

DEFAULT_LIMIT = 12
MAX_LIMIT = 100


@dataclass(frozen=True)
class Page:
    items: List[Any]
    total: int
    pages: int
    page: int
    limit: int


def resolve_pagination(
    page: Optional[int],
    limit: Optional[int],
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> Tuple[int, int]:
    """
    Apply defaults, reject non-positive values and cap the page size.

    Raises:
        ValidationError: page or limit below 1
    """
    page = 1 if page is None else page
    limit = default_limit if limit is None else limit
    if page < 1:
        raise ValidationError("page must be greater than or equal to 1", field="page")
    if limit < 1:
        raise ValidationError("limit must be greater than or equal to 1", field="limit")
    return page, min(limit, max_limit)


def paginate(ranked: Sequence[Any], page: int, limit: int) -> Page:
    """Slice one page; a page past the end is empty but still reports totals."""
    if page < 1:
        raise ValidationError("page must be greater than or equal to 1", field="page")
    if limit < 1:
        raise ValidationError("limit must be greater than or equal to 1", field="limit")

    total = len(ranked)
    pages = max(1, math.ceil(total / limit))
    start = (page - 1) * limit
    end = start + limit
    return Page(items=list(ranked[start:end]), total=total, pages=pages, page=page, limit=limit)
