# sharer/repositories/base.py
"""
Storage contract for the application layer.

Any backend (relational, key-value, in-memory) that satisfies these
protocols can be plugged in. Every operation only sees live rows; soft
deleted records behave as absent.

Getters raise ``NotFoundError`` when nothing matches. Any other backend
failure is raised as ``StorageError``.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol

from sharer.models.category import Category
from sharer.models.page import Page


class PageRepository(Protocol):
    def create(self, page: Page) -> Page: ...

    def get_by_id(self, page_id: int) -> Page: ...

    def get_by_key(self, slug: str) -> Page: ...

    def list(self, offset: int, limit: int, *, category_id: Optional[int] = None) -> List[Page]: ...

    def count(self, *, category_id: Optional[int] = None) -> int: ...

    def update(self, page_id: int, fields: Mapping[str, Any]) -> Page: ...

    def soft_delete(self, page_id: int) -> None: ...

    def exists(self, slug: str) -> bool: ...

    def clear_category(self, category_id: int) -> int: ...


class CategoryRepository(Protocol):
    def create(self, category: Category) -> Category: ...

    def get_by_id(self, category_id: int) -> Category: ...

    def get_by_key(self, name: str) -> Category: ...

    def list(self, offset: int, limit: int) -> List[Category]: ...

    def all(self) -> List[Category]: ...

    def count(self) -> int: ...

    def update(self, category_id: int, fields: Mapping[str, Any]) -> Category: ...

    def soft_delete(self, category_id: int) -> None: ...

    def exists(self, name: str) -> bool: ...


PAGE_UPDATE_FIELDS = {"html_content", "title"}
CATEGORY_UPDATE_FIELDS = {"name", "description"}
