"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Storage failures are not wrapped: repositories let SQLAlchemy's own
exceptions propagate. StorageError names that family so callers can
catch it without importing SQLAlchemy.
"""

from sqlalchemy.exc import SQLAlchemyError

StorageError = SQLAlchemyError


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")
