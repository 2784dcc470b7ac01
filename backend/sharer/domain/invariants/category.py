from ..exceptions import ValidationError


def normalize_category_name(name, *, updating: bool = False) -> str:
    """
    Trim a category name and reject blank values.
    """
    cleaned = (name or "").strip()
    if not cleaned:
        if updating:
            raise ValidationError("Category name cannot be empty")
        raise ValidationError("Category name is required")
    return cleaned


def normalize_description(description) -> str:
    return (description or "").strip()
