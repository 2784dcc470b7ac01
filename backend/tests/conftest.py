import pytest

from sharer import create_app
from sharer.extensions import db
from sharer.repositories.memory import InMemoryCategoryRepository, InMemoryPageRepository


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def categories():
    return InMemoryCategoryRepository()


@pytest.fixture
def pages(categories):
    return InMemoryPageRepository(categories)


def scripted_choice(*slugs):
    """A random source that spells out the given slugs in order."""
    chars = iter("".join(slugs))
    return lambda alphabet: next(chars)
