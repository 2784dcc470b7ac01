# sharer/repositories/memory.py
"""
In-process repositories.

They hold transient model instances in dictionaries and apply the same
rules as the relational backend: soft-deleted rows are invisible, slugs and
category names are unique among live rows, listings use the same ordering.
Used by the test-suite and by ``REPOSITORY_BACKEND=memory``.
"""
from __future__ import annotations

import itertools
import threading
from typing import Any, Dict, List, Mapping, Optional

from sharer.domain.exceptions import NotFoundError, StorageError
from sharer.models.base import utc_now
from sharer.models.category import Category
from sharer.models.page import Page
from .base import CATEGORY_UPDATE_FIELDS, PAGE_UPDATE_FIELDS


class InMemoryCategoryRepository:
    def __init__(self):
        self._rows: Dict[int, Category] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def _live(self) -> List[Category]:
        with self._lock:
            rows = list(self._rows.values())
        return [c for c in rows if not c.is_deleted]

    def _sorted(self) -> List[Category]:
        return sorted(self._live(), key=lambda c: (c.name, c.id))

    def create(self, category: Category) -> Category:
        with self._lock:
            if any(c.name == category.name for c in self._live()):
                raise StorageError("Error creating category")

            now = utc_now()
            category.id = next(self._ids)
            category.created_at = now
            category.updated_at = now
            category.deleted_at = None
            self._rows[category.id] = category
        return category

    def get_by_id(self, category_id: int) -> Category:
        category = self._rows.get(category_id)
        if category is None or category.is_deleted:
            raise NotFoundError("Category not found")
        return category

    def get_by_key(self, name: str) -> Category:
        for category in self._live():
            if category.name == name:
                return category
        raise NotFoundError("Category not found")

    def list(self, offset: int, limit: int) -> List[Category]:
        return self._sorted()[offset:offset + limit]

    def all(self) -> List[Category]:
        return self._sorted()

    def count(self) -> int:
        return len(self._live())

    def update(self, category_id: int, fields: Mapping[str, Any]) -> Category:
        with self._lock:
            category = self.get_by_id(category_id)
            new_name = fields.get("name", category.name)
            if any(c.name == new_name and c.id != category.id for c in self._live()):
                raise StorageError("Error updating category")

            for field in CATEGORY_UPDATE_FIELDS:
                if field in fields:
                    setattr(category, field, fields[field])
            category.updated_at = utc_now()
        return category

    def soft_delete(self, category_id: int) -> None:
        with self._lock:
            category = self.get_by_id(category_id)
            category.soft_delete()

    def exists(self, name: str) -> bool:
        return any(c.name == name for c in self._live())


class InMemoryPageRepository:
    def __init__(self, categories: Optional[InMemoryCategoryRepository] = None):
        self._rows: Dict[int, Page] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._categories = categories

    def _live(self, category_id: Optional[int] = None) -> List[Page]:
        with self._lock:
            rows = list(self._rows.values())
        return [
            p for p in rows
            if not p.is_deleted and (category_id is None or p.category_id == category_id)
        ]

    def _attach_category(self, page: Page) -> None:
        if self._categories is None or page.category_id is None:
            page.category = None
            return
        try:
            page.category = self._categories.get_by_id(page.category_id)
        except NotFoundError:
            page.category = None

    def create(self, page: Page) -> Page:
        with self._lock:
            if any(p.slug == page.slug for p in self._live()):
                raise StorageError("Error saving content")

            now = utc_now()
            page.id = next(self._ids)
            page.created_at = now
            page.updated_at = now
            page.deleted_at = None
            self._attach_category(page)
            self._rows[page.id] = page
        return page

    def get_by_id(self, page_id: int) -> Page:
        page = self._rows.get(page_id)
        if page is None or page.is_deleted:
            raise NotFoundError("Page not found")
        return page

    def get_by_key(self, slug: str) -> Page:
        for page in self._live():
            if page.slug == slug:
                return page
        raise NotFoundError("Page not found")

    def list(self, offset: int, limit: int, *, category_id: Optional[int] = None) -> List[Page]:
        rows = sorted(
            self._live(category_id),
            key=lambda p: (p.created_at, p.id),
            reverse=True,
        )
        return rows[offset:offset + limit]

    def count(self, *, category_id: Optional[int] = None) -> int:
        return len(self._live(category_id))

    def update(self, page_id: int, fields: Mapping[str, Any]) -> Page:
        with self._lock:
            page = self.get_by_id(page_id)
            for field in PAGE_UPDATE_FIELDS:
                if field in fields:
                    setattr(page, field, fields[field])
            page.updated_at = utc_now()
        return page

    def soft_delete(self, page_id: int) -> None:
        with self._lock:
            page = self.get_by_id(page_id)
            page.soft_delete()

    def exists(self, slug: str) -> bool:
        return any(p.slug == slug for p in self._live())

    def clear_category(self, category_id: int) -> int:
        cleared = 0
        with self._lock:
            for page in self._rows.values():
                if page.category_id == category_id:
                    page.category_id = None
                    page.category = None
                    cleared += 1
        return cleared
