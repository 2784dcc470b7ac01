# sharer/api/v1/pages.py
from flask import current_app, request, jsonify

from sharer.application.pages.create_page import create_page
from sharer.application.pages.delete_page import delete_page
from sharer.application.pages.get_page import get_page_by_slug
from sharer.application.pages.list_pages import list_pages
from sharer.application.pages.update_page import update_page
from sharer.dependencies import category_repository, page_repository
from sharer.domain.exceptions import ValidationError
from sharer.normalizers.page import normalize_page
from sharer.normalizers.pagination import normalize_pagination
from . import v1_bp


def parse_category_id(raw):
    """
    Accept an int or a numeric string. Empty means "no category".
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValidationError("Invalid category ID")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Invalid category ID")
    if value < 1:
        raise ValidationError("Invalid category ID")
    return value


def share_json():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON")

    page = create_page(
        pages=page_repository(),
        categories=category_repository(),
        html_content=data.get("html_content"),
        title=data.get("title"),
        category_id=parse_category_id(data.get("category_id")),
    )

    url = f"{current_app.config['SHARED_URL_PREFIX']}{page.slug}"
    return jsonify({"url": url, "slug": page.slug}), 201


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/share", methods=["POST"])
def share_page():
    return share_json()


@v1_bp.route("/pages", methods=["GET"])
def list_shared_pages():
    result = list_pages(
        pages=page_repository(),
        page=request.args.get("page"),
        page_size=request.args.get("page_size"),
        category_id=parse_category_id(request.args.get("category")),
    )
    prefix = current_app.config["SHARED_URL_PREFIX"]

    return jsonify(
        normalize_pagination(result, lambda p: normalize_page(p, url_prefix=prefix))
    )


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_shared_page(slug):
    page = get_page_by_slug(pages=page_repository(), slug=slug)
    return jsonify(
        normalize_page(page, detail=True, url_prefix=current_app.config["SHARED_URL_PREFIX"])
    )


@v1_bp.route("/pages/<slug>", methods=["PUT"])
def update_shared_page(slug):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON")

    page = update_page(
        pages=page_repository(),
        slug=slug,
        data=data,
        if_unmodified_since=request.headers.get("If-Unmodified-Since"),
    )

    return jsonify(
        normalize_page(page, detail=True, url_prefix=current_app.config["SHARED_URL_PREFIX"])
    )


@v1_bp.route("/pages/<slug>", methods=["DELETE"])
def delete_shared_page(slug):
    delete_page(pages=page_repository(), slug=slug)
    return jsonify({"message": "Page deleted successfully"}), 200
