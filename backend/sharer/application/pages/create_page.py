import logging
import threading
from typing import Optional

from sharer.domain.exceptions import NotFoundError, ValidationError
from sharer.domain.invariants.page import (
    TITLE_MAX_LENGTH,
    assert_page_content,
    normalize_page_title,
)
from sharer.models.page import Page
from sharer.repositories.base import CategoryRepository, PageRepository
from sharer.utils.slug import SlugGenerator
from sharer.utils.title import extract_title

logger = logging.getLogger(__name__)

_default_generator = SlugGenerator()


def create_page(
    *,
    pages: PageRepository,
    categories: Optional[CategoryRepository] = None,
    html_content: str,
    title: Optional[str] = None,
    category_id: Optional[int] = None,
    slugs: Optional[SlugGenerator] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Page:
    """
    Store a new shared page under a fresh random slug.

    Edge cases handled:
    - Blank content is rejected before any storage call
    - Unknown category ids are rejected
    - Missing title is derived from <title> / <h1>
    - Slug collisions are retried a bounded number of times
    """
    assert_page_content(html_content)
    title = normalize_page_title(title) or extract_title(html_content)

    if category_id is not None and categories is not None:
        try:
            categories.get_by_id(category_id)
        except NotFoundError:
            raise ValidationError("Category not found")

    generator = slugs or _default_generator
    slug = generator.generate(pages.exists, cancel_event=cancel_event)

    page = Page()
    page.slug = slug
    page.html_content = html_content
    page.title = title[:TITLE_MAX_LENGTH]
    page.category_id = category_id

    page = pages.create(page)
    logger.info("Created shared page %s (id=%s)", page.slug, page.id)
    return page
