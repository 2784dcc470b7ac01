# sharer/api/v1/categories.py
from flask import request, jsonify

from sharer.application.categories.create_category import create_category
from sharer.application.categories.delete_category import delete_category
from sharer.application.categories.list_categories import get_category, list_categories
from sharer.application.categories.update_category import update_category
from sharer.dependencies import category_repository, page_repository
from sharer.domain.exceptions import ValidationError
from sharer.normalizers.category import normalize_category
from sharer.normalizers.pagination import normalize_pagination
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON")
    return data


# ------------------------
# Categories
# ------------------------

@v1_bp.route("/categories", methods=["GET"])
def list_all_categories():
    result = list_categories(
        categories=category_repository(),
        page=request.args.get("page"),
        page_size=request.args.get("page_size"),
    )
    return jsonify(normalize_pagination(result, normalize_category))


@v1_bp.route("/categories", methods=["POST"])
def create_new_category():
    category = create_category(categories=category_repository(), data=_json_body())
    return jsonify({"category": normalize_category(category, detail=True)}), 201


@v1_bp.route("/categories/<int:category_id>", methods=["GET"])
def get_single_category(category_id):
    category = get_category(categories=category_repository(), category_id=category_id)
    return jsonify({"category": normalize_category(category, detail=True)})


@v1_bp.route("/categories/<int:category_id>", methods=["PUT"])
def update_existing_category(category_id):
    category = update_category(
        categories=category_repository(),
        category_id=category_id,
        data=_json_body(),
    )
    return jsonify({"category": normalize_category(category, detail=True)})


@v1_bp.route("/categories/<int:category_id>", methods=["DELETE"])
def delete_existing_category(category_id):
    detached = delete_category(
        categories=category_repository(),
        pages=page_repository(),
        category_id=category_id,
    )
    return jsonify({
        "message": "Category deleted successfully",
        "detached_pages": detached,
    }), 200
