import logging

from sharer.repositories.base import PageRepository

logger = logging.getLogger(__name__)


def delete_page(*, pages: PageRepository, slug: str) -> None:
    """Soft-delete a page; its slug stops resolving immediately."""
    page = pages.get_by_key(slug)
    pages.soft_delete(page.id)
    logger.info("Deleted shared page %s", slug)
