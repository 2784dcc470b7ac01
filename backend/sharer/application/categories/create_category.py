import logging
from typing import Any, Dict

from sharer.domain.exceptions import ValidationError
from sharer.domain.invariants.category import normalize_category_name, normalize_description
from sharer.models.category import Category
from sharer.repositories.base import CategoryRepository

logger = logging.getLogger(__name__)


def create_category(*, categories: CategoryRepository, data: Dict[str, Any]) -> Category:
    """
    Create a category after trimming and uniqueness checks.

    Name comparison is exact and case-sensitive.
    """
    name = normalize_category_name(data.get("name"))

    if categories.exists(name):
        raise ValidationError("Category name already exists")

    category = Category()
    category.name = name
    category.description = normalize_description(data.get("description"))

    category = categories.create(category)
    logger.info("Created category %r (id=%s)", category.name, category.id)
    return category
