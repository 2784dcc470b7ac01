import logging
from typing import Any, Dict

from sharer.domain.exceptions import ValidationError
from sharer.domain.invariants.category import normalize_category_name, normalize_description
from sharer.models.category import Category
from sharer.repositories.base import CategoryRepository

logger = logging.getLogger(__name__)


def update_category(
    *,
    categories: CategoryRepository,
    category_id: int,
    data: Dict[str, Any],
) -> Category:
    """
    Rename and/or redescribe a category.

    Keys absent from ``data`` are left unchanged. Keeping the current name is
    not a collision.
    """
    category = categories.get_by_id(category_id)
    fields: Dict[str, Any] = {}

    if data.get("name") is not None:
        name = normalize_category_name(data["name"], updating=True)
        if name != category.name and categories.exists(name):
            raise ValidationError("Category name already exists")
        fields["name"] = name

    if data.get("description") is not None:
        fields["description"] = normalize_description(data["description"])

    if not fields:
        return category

    category = categories.update(category_id, fields)
    logger.info("Updated category id=%s fields=%s", category_id, sorted(fields))
    return category
