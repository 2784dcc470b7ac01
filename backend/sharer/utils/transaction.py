import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sharer.domain.exceptions import StorageError
from sharer.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message: str = "Error saving content"):
    """Commit on success; roll back and raise StorageError on database failure."""
    try:
        yield
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning("Integrity error: %s", exc.orig)
        raise StorageError(message) from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Database failure")
        raise StorageError(message) from exc
    except Exception:
        db.session.rollback()
        raise


@contextmanager
def reading(message: str = "Error loading content"):
    """Translate read-side database failures into StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Database failure")
        raise StorageError(message) from exc
