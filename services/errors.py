"""Errors raised by the record services"""


class RecordError(Exception):
    """Base error for record operations; carries the HTTP status it maps to"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Conflict(RecordError):
    """A unique field is already taken"""

    status_code = 400


class NotFound(RecordError):
    """No record matches"""

    status_code = 404


class InvalidCredentials(RecordError):
    """Password does not match the stored hash"""

    status_code = 400


class InvalidArgument(RecordError):
    """Malformed record identifier"""

    status_code = 400


class PersistenceError(RecordError):
    """The store rejected a write or could not be reached"""

    status_code = 500


def require_fields(record: str, values: dict, names) -> None:
    """Raise PersistenceError unless every named field is present and non-empty.

    Mirrors the store's notion of a required string: ``None`` and ``""``
    are both rejected before the insert is attempted.
    """
    missing = [name for name in names if values.get(name) in (None, "")]
    if missing:
        raise PersistenceError(f"{record} validation failed: {', '.join(missing)} required")
