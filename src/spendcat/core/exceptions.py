"""Exception classes raised by the validation rules, stores and services.

Each exception carries an ``ErrorKind`` from errors.py; the HTTP status is
looked up in the catalog so a kind always maps to the same response.
"""

from typing import Any

from spendcat.core.errors import ErrorKind, get_status


class SpendcatError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Kind from the error catalog (e.g. ``ErrorKind.FIELD_MISSING``)
        details: Additional context about the error (for logging)
        http_status: HTTP status code resolved from the catalog
    """

    def __init__(
        self,
        error_code: ErrorKind,
        details: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            error_code: Error kind from errors.py
            details: Additional error context (not shown to clients)
        """
        self.error_code = ErrorKind(error_code)
        self.details = details or {}
        self.http_status = get_status(self.error_code)
        super().__init__(self.error_code.value)


class RequestShapeError(SpendcatError):
    """Raised when the request body is malformed or lacks a required field.

    Covers InvalidJSON, FieldMissing, TitleEmpty, TypeEmpty and the option
    shape errors.
    """

    pass


class InvalidValueError(SpendcatError):
    """Raised when a value is present but semantically unacceptable.

    Includes invalid characters in names/titles, unknown question types,
    unknown parent IDs and nesting violations.
    """

    pass


class ConflictError(SpendcatError):
    """Raised when a write would break a uniqueness or reference invariant."""

    pass


class NotFoundError(SpendcatError):
    """Raised when a resource is missing or is addressed through the wrong parent."""

    pass
