# sharer/normalizers/pagination.py
from typing import Callable, Any, Dict

from sharer.utils.pagination import Paginated


def normalize_pagination(
    result: Paginated,
    normalize_fn: Callable[[Any], Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Normalize a paginated listing into the API envelope:

    {"items": [...], "pagination": {page, page_size, total, total_pages,
    has_next, has_prev}}
    """
    return {
        "items": [normalize_fn(item) for item in result.items],
        "pagination": dict(result.meta),
    }
