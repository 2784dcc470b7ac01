from datetime import timezone
from dateutil.parser import parse, ParserError

from sharer.domain.exceptions import ConflictError, ValidationError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity, header_value):
    """
    Enforces optimistic locking using an If-Unmodified-Since value.
    Raises ConflictError if the entity has been modified since.
    """
    if not header_value:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(header_value))
    except (ParserError, OverflowError, ValueError):
        raise ValidationError("Invalid If-Unmodified-Since header")

    # HTTP dates carry whole seconds only
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise ConflictError()
