from sharer.domain.exceptions import NotFoundError
from sharer.models.page import Page
from sharer.repositories.base import PageRepository
from sharer.utils.slug import is_valid_slug


def get_page_by_slug(*, pages: PageRepository, slug: str) -> Page:
    # Anything that could never have been generated is a miss without a query
    if not is_valid_slug(slug):
        raise NotFoundError("Page not found")
    return pages.get_by_key(slug)
