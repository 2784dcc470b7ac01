# sharer/utils/slug.py
from __future__ import annotations

import logging
import secrets
import string
import threading
from typing import Callable, Optional, Sequence

from sharer.domain.exceptions import ExhaustedRetries, OperationCancelled

logger = logging.getLogger(__name__)

SLUG_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SLUG_LENGTH = 8
MAX_ATTEMPTS = 10


class SlugGenerator:
    """
    Draws short random slugs and retries on collision.

    Each character is drawn independently with replacement. The random
    source defaults to ``secrets.choice``; tests pass a deterministic one.

    The existence check is advisory: a concurrent insert of the same slug
    can still win the race, in which case the unique index rejects the
    second insert and the caller sees a ``StorageError``.
    """

    def __init__(
        self,
        *,
        alphabet: str = SLUG_ALPHABET,
        length: int = SLUG_LENGTH,
        max_attempts: int = MAX_ATTEMPTS,
        choice: Callable[[Sequence[str]], str] = secrets.choice,
    ):
        if length <= 0 or max_attempts <= 0:
            raise ValueError("length and max_attempts must be positive")

        self.alphabet = alphabet
        self.length = length
        self.max_attempts = max_attempts
        self._choice = choice

    def candidate(self) -> str:
        return "".join(self._choice(self.alphabet) for _ in range(self.length))

    def generate(
        self,
        exists: Callable[[str], bool],
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        """
        Return a slug for which ``exists`` is false.

        Raises:
        - ExhaustedRetries after ``max_attempts`` collisions
        - OperationCancelled if ``cancel_event`` is set between attempts
        """
        for attempt in range(1, self.max_attempts + 1):
            if cancel_event is not None and cancel_event.is_set():
                raise OperationCancelled("Slug generation cancelled")

            slug = self.candidate()
            if not exists(slug):
                return slug

            logger.debug("Slug collision on attempt %d: %s", attempt, slug)

        logger.warning("Slug generation exhausted %d attempts", self.max_attempts)
        raise ExhaustedRetries(self.max_attempts)


def is_valid_slug(value: str) -> bool:
    return (
        isinstance(value, str)
        and len(value) == SLUG_LENGTH
        and all(ch in SLUG_ALPHABET for ch in value)
    )
