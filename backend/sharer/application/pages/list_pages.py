from typing import Any, Optional

from sharer.repositories.base import PageRepository
from sharer.utils.pagination import Paginated, normalize_page_params, paginate


def list_pages(
    *,
    pages: PageRepository,
    page: Any = None,
    page_size: Any = None,
    category_id: Optional[int] = None,
) -> Paginated:
    """
    Newest pages first, optionally narrowed to one category.

    The category filter scopes both the window and the total.
    """
    window = normalize_page_params(page, page_size)
    return paginate(pages, window, category_id=category_id)
