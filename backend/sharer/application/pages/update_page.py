import logging
from typing import Any, Dict, Optional

from sharer.domain.exceptions import ValidationError
from sharer.domain.invariants.page import assert_page_content, normalize_page_title
from sharer.models.page import Page
from sharer.repositories.base import PageRepository
from sharer.utils.optimistic_lock import enforce_optimistic_lock

logger = logging.getLogger(__name__)


def update_page(
    *,
    pages: PageRepository,
    slug: str,
    data: Dict[str, Any],
    if_unmodified_since: Optional[str] = None,
) -> Page:
    """
    Edit the content and/or title of an existing page.

    Design rules:
    - The slug never changes
    - No silent no-op updates
    - Content is revalidated when supplied
    """
    page = pages.get_by_key(slug)
    enforce_optimistic_lock(page, if_unmodified_since)

    fields: Dict[str, Any] = {}

    if data.get("html_content") is not None:
        fields["html_content"] = assert_page_content(data["html_content"])

    if data.get("title") is not None:
        fields["title"] = normalize_page_title(data["title"]) or ""

    if not fields:
        raise ValidationError("No valid fields provided for update")

    page = pages.update(page.id, fields)
    logger.info("Updated shared page %s fields=%s", page.slug, sorted(fields))
    return page
