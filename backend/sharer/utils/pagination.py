# sharer/utils/pagination.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypedDict, TypeVar

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
# Keeps (page - 1) * page_size inside a signed 64-bit OFFSET.
MAX_PAGE = 2 ** 63 // MAX_PAGE_SIZE

T = TypeVar("T")


class OffsetMeta(TypedDict):
    """
    Offset pagination metadata.

    Explicit keys prevent contract drift across list_* endpoints.
    """
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class PageWindow:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Paginated(Generic[T]):
    items: List[T]
    meta: OffsetMeta


def _coerce_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_page_params(page: Any = None, page_size: Any = None) -> PageWindow:
    """
    Clamp raw (page, page_size) input into a usable window.

    Rules:
    - page < 1 (or unparsable) -> 1
    - page > MAX_PAGE -> MAX_PAGE (the window is simply empty)
    - page_size < 1, > MAX_PAGE_SIZE (or unparsable) -> DEFAULT_PAGE_SIZE
    """
    page_num = _coerce_int(page)
    size = _coerce_int(page_size)

    if page_num is None or page_num < 1:
        page_num = 1
    elif page_num > MAX_PAGE:
        page_num = MAX_PAGE

    if size is None or size < 1 or size > MAX_PAGE_SIZE:
        size = DEFAULT_PAGE_SIZE

    return PageWindow(page=page_num, page_size=size)


def build_meta(window: PageWindow, total: int) -> OffsetMeta:
    """
    Derive paging metadata from the window and the filtered total.

    The total is counted in a separate query from the window fetch, so under
    concurrent writes the two may disagree slightly.
    """
    total = max(int(total), 0)
    total_pages = math.ceil(total / window.page_size)

    return {
        "page": window.page,
        "page_size": window.page_size,
        "total": total,
        "total_pages": total_pages,
        "has_next": window.page < total_pages,
        "has_prev": window.page > 1,
    }


def paginate(repository, window: PageWindow, **filters) -> Paginated:
    """
    Fetch one window from a repository plus the matching total.

    Strategy:
    - list(offset, limit, **filters) for the rows
    - count(**filters) for the total, same filter scope
    """
    items = repository.list(window.offset, window.limit, **filters)
    total = repository.count(**filters)

    return Paginated(items=list(items)[: window.limit], meta=build_meta(window, total))
