# sharer/repositories/relational.py
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from sharer.domain.exceptions import NotFoundError
from sharer.extensions import db
from sharer.models.category import Category
from sharer.models.page import Page
from sharer.utils.transaction import reading, transactional
from .base import CATEGORY_UPDATE_FIELDS, PAGE_UPDATE_FIELDS


class SqlAlchemyPageRepository:
    """Pages stored through the Flask-SQLAlchemy session."""

    def _live(self):
        return Page.query.filter(Page.deleted_at.is_(None))

    def create(self, page: Page) -> Page:
        with transactional("Error saving content"):
            db.session.add(page)
            db.session.flush()  # ensures page.id is available
        return page

    def get_by_id(self, page_id: int) -> Page:
        with reading():
            page = self._live().filter(Page.id == page_id).first()
        if page is None:
            raise NotFoundError("Page not found")
        return page

    def get_by_key(self, slug: str) -> Page:
        with reading():
            page = self._live().filter(Page.slug == slug).first()
        if page is None:
            raise NotFoundError("Page not found")
        return page

    def list(self, offset: int, limit: int, *, category_id: Optional[int] = None) -> List[Page]:
        query = self._live()
        if category_id is not None:
            query = query.filter(Page.category_id == category_id)

        with reading():
            return (
                query.order_by(Page.created_at.desc(), Page.id.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )

    def count(self, *, category_id: Optional[int] = None) -> int:
        query = self._live()
        if category_id is not None:
            query = query.filter(Page.category_id == category_id)

        with reading():
            return query.count()

    def update(self, page_id: int, fields: Mapping[str, Any]) -> Page:
        page = self.get_by_id(page_id)

        with transactional("Error updating content"):
            for field in PAGE_UPDATE_FIELDS:
                if field in fields:
                    setattr(page, field, fields[field])
        return page

    def soft_delete(self, page_id: int) -> None:
        page = self.get_by_id(page_id)

        with transactional("Error deleting content"):
            page.soft_delete()

    def exists(self, slug: str) -> bool:
        with reading():
            row = (
                db.session.query(Page.id)
                .filter(Page.slug == slug, Page.deleted_at.is_(None))
                .first()
            )
        return row is not None

    def clear_category(self, category_id: int) -> int:
        with transactional("Error updating content"):
            result = db.session.execute(
                db.update(Page)
                .where(Page.category_id == category_id)
                .values(category_id=None)
                .execution_options(synchronize_session="fetch")
            )
        return result.rowcount


class SqlAlchemyCategoryRepository:
    """Categories stored through the Flask-SQLAlchemy session."""

    def _live(self):
        return Category.query.filter(Category.deleted_at.is_(None))

    def create(self, category: Category) -> Category:
        with transactional("Error creating category"):
            db.session.add(category)
            db.session.flush()
        return category

    def get_by_id(self, category_id: int) -> Category:
        with reading():
            category = self._live().filter(Category.id == category_id).first()
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def get_by_key(self, name: str) -> Category:
        with reading():
            category = self._live().filter(Category.name == name).first()
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def list(self, offset: int, limit: int) -> List[Category]:
        with reading():
            return (
                self._live()
                .order_by(Category.name.asc(), Category.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )

    def all(self) -> List[Category]:
        with reading():
            return self._live().order_by(Category.name.asc(), Category.id.asc()).all()

    def count(self) -> int:
        with reading():
            return self._live().count()

    def update(self, category_id: int, fields: Mapping[str, Any]) -> Category:
        category = self.get_by_id(category_id)

        with transactional("Error updating category"):
            for field in CATEGORY_UPDATE_FIELDS:
                if field in fields:
                    setattr(category, field, fields[field])
        return category

    def soft_delete(self, category_id: int) -> None:
        category = self.get_by_id(category_id)

        with transactional("Error deleting category"):
            category.soft_delete()

    def exists(self, name: str) -> bool:
        with reading():
            row = (
                db.session.query(Category.id)
                .filter(Category.name == name, Category.deleted_at.is_(None))
                .first()
            )
        return row is not None
