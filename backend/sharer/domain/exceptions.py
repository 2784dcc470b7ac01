class SharerError(Exception):
    """Base class for every error the service reports to callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SharerError):
    status_code = 400
    default_message = "Invalid input"


class NotFoundError(SharerError):
    status_code = 404
    default_message = "Not found"


class ConflictError(SharerError):
    status_code = 409
    default_message = "Conflict detected. Resource has been modified."


class ExhaustedRetries(SharerError):
    """Slug generation collided on every allowed attempt."""

    default_message = "Error generating unique slug"

    def __init__(self, attempts: int):
        super().__init__()
        self.attempts = attempts


class StorageError(SharerError):
    """Wraps any failure raised by the persistence backend."""

    default_message = "Error saving content"


class OperationCancelled(SharerError):
    status_code = 499
    default_message = "Operation cancelled"
