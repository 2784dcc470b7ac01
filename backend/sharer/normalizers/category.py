from .page import _iso


def normalize_category(category, detail=False):
    data = {
        "id": category.id,
        "name": category.name,
        "description": category.description or "",
        "created_at": _iso(category.created_at),
    }

    if detail:
        data["updated_at"] = _iso(category.updated_at)

    return data
