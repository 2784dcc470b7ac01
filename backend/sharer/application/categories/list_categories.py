from typing import Any, List

from sharer.models.category import Category
from sharer.repositories.base import CategoryRepository
from sharer.utils.pagination import Paginated, normalize_page_params, paginate


def list_categories(
    *,
    categories: CategoryRepository,
    page: Any = None,
    page_size: Any = None,
) -> Paginated:
    """Categories ordered by name, one window at a time."""
    window = normalize_page_params(page, page_size)
    return paginate(categories, window)


def all_categories(*, categories: CategoryRepository) -> List[Category]:
    return categories.all()


def get_category(*, categories: CategoryRepository, category_id: int) -> Category:
    return categories.get_by_id(category_id)
