from flask import current_app

from sharer.repositories.memory import InMemoryCategoryRepository, InMemoryPageRepository
from sharer.repositories.relational import SqlAlchemyCategoryRepository, SqlAlchemyPageRepository

EXTENSION_KEY = "sharer.repositories"


def init_repositories(app):
    """Attach one repository pair to the app according to REPOSITORY_BACKEND."""
    backend = app.config.get("REPOSITORY_BACKEND", "sqlalchemy")

    if backend == "memory":
        categories = InMemoryCategoryRepository()
        pages = InMemoryPageRepository(categories)
    elif backend == "sqlalchemy":
        categories = SqlAlchemyCategoryRepository()
        pages = SqlAlchemyPageRepository()
    else:
        raise ValueError(f"Unknown REPOSITORY_BACKEND: {backend!r}")

    app.extensions[EXTENSION_KEY] = {"pages": pages, "categories": categories}
    app.logger.debug("Using %s repositories", backend)


def page_repository():
    return current_app.extensions[EXTENSION_KEY]["pages"]


def category_repository():
    return current_app.extensions[EXTENSION_KEY]["categories"]
