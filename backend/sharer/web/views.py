# sharer/web/views.py
from flask import Blueprint, Response, current_app, jsonify, redirect, render_template, request, url_for
from markupsafe import escape

from sharer.api.v1.pages import parse_category_id, share_json
from sharer.application.categories.create_category import create_category
from sharer.application.categories.delete_category import delete_category
from sharer.application.categories.list_categories import all_categories, get_category, list_categories
from sharer.application.categories.update_category import update_category
from sharer.application.pages.create_page import create_page
from sharer.application.pages.get_page import get_page_by_slug
from sharer.application.pages.list_pages import list_pages
from sharer.dependencies import category_repository, page_repository
from sharer.utils.uploads import resolve_form_content

web_bp = Blueprint("web", __name__)


def is_htmx():
    return request.headers.get("HX-Request") == "true"


# ------------------------
# Sharing
# ------------------------

@web_bp.route("/", methods=["GET"])
def home():
    return render_template(
        "home.html",
        success=request.args.get("success"),
        categories=all_categories(categories=category_repository()),
    )


@web_bp.route("/", methods=["POST"])
def share_from_form():
    html_content = resolve_form_content(
        request.form.get("htmlContent"),
        request.files.get("htmlFile"),
    )

    page = create_page(
        pages=page_repository(),
        categories=category_repository(),
        html_content=html_content,
        title=request.form.get("title"),
        category_id=parse_category_id(request.form.get("category_id")),
    )

    path = f"{current_app.config['SHARED_URL_PREFIX']}{page.slug}"

    if request.accept_mimetypes.best == "application/json":
        return jsonify({"url": path, "slug": page.slug}), 201

    if is_htmx():
        return render_template("_success.html", url=request.host_url.rstrip("/") + path)

    return redirect(url_for("web.home", success=page.slug), code=303)


@web_bp.route("/api/share", methods=["POST"])
def share_legacy_api():
    return share_json()


@web_bp.route("/shared/<slug>", methods=["GET"])
def shared_content(slug):
    page = get_page_by_slug(pages=page_repository(), slug=slug)
    return Response(page.html_content, status=200, mimetype="text/html")


@web_bp.route("/pages", methods=["GET"])
def page_index():
    category_id = parse_category_id(request.args.get("category"))
    result = list_pages(
        pages=page_repository(),
        page=request.args.get("page"),
        page_size=request.args.get("page_size"),
        category_id=category_id,
    )
    return render_template(
        "pages.html",
        pages=result.items,
        meta=result.meta,
        category_id=category_id,
        categories=all_categories(categories=category_repository()),
    )


# ------------------------
# Categories
# ------------------------

@web_bp.route("/categories", methods=["GET"])
def category_index():
    result = list_categories(
        categories=category_repository(),
        page=request.args.get("page"),
        page_size=request.args.get("page_size"),
    )
    return render_template("categories.html", categories=result.items, meta=result.meta)


@web_bp.route("/categories/new", methods=["GET"])
def category_new():
    return render_template("category_form.html", category=None)


@web_bp.route("/categories", methods=["POST"])
def category_store():
    create_category(categories=category_repository(), data=request.form.to_dict())
    return redirect(url_for("web.category_index"), code=303)


@web_bp.route("/categories/<int:category_id>/edit", methods=["GET"])
def category_edit(category_id):
    category = get_category(categories=category_repository(), category_id=category_id)
    return render_template("category_form.html", category=category)


@web_bp.route("/categories/<int:category_id>", methods=["POST"])
def category_update(category_id):
    update_category(
        categories=category_repository(),
        category_id=category_id,
        data=request.form.to_dict(),
    )
    return redirect(url_for("web.category_index"), code=303)


@web_bp.route("/categories/<int:category_id>/delete", methods=["POST"])
def category_delete(category_id):
    delete_category(
        categories=category_repository(),
        pages=page_repository(),
        category_id=category_id,
    )
    return redirect(url_for("web.category_index"), code=303)


@web_bp.route("/categories/options", methods=["GET"])
def category_options():
    """<option> list for the category select on the share form."""
    options = ['<option value="">Select a category...</option>']
    for category in all_categories(categories=category_repository()):
        options.append(f'<option value="{category.id}">{escape(category.name)}</option>')

    return Response("".join(options), mimetype="text/html")
