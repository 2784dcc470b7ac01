def _iso(ts):
    return ts.isoformat() if ts is not None else None


def normalize_page(page, detail=False, url_prefix="/shared/"):
    data = {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
        "url": f"{url_prefix}{page.slug}",
        "category_id": page.category_id,
        "category_name": page.category_name,
        "created_at": _iso(page.created_at),
    }

    if detail:
        data["html_content"] = page.html_content
        data["updated_at"] = _iso(page.updated_at)

    return data
