import logging

from sharer.repositories.base import CategoryRepository, PageRepository

logger = logging.getLogger(__name__)


def delete_category(
    *,
    categories: CategoryRepository,
    pages: PageRepository,
    category_id: int,
) -> int:
    """
    Soft-delete a category.

    Pages that referenced it keep existing and become uncategorised; their
    category_id is cleared before the category row is marked deleted.
    Returns the number of pages that were detached.
    """
    categories.get_by_id(category_id)

    detached = pages.clear_category(category_id)
    categories.soft_delete(category_id)

    logger.info("Deleted category id=%s, detached %d page(s)", category_id, detached)
    return detached
