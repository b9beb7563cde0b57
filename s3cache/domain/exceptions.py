"""Domain exceptions for the s3cache package.

Defines the package-level exception base and input validation errors.
These exceptions are independent of the object store client; errors
raised by the store itself (botocore) are not wrapped.
"""

from typing import Any


class S3CacheException(Exception):
    """Base exception for all s3cache errors.

    All custom exceptions inherit from this class so callers can catch
    cache-level failures in one place while store errors still propagate
    as their own botocore types.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(S3CacheException):
    """Raised when configuration or input validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)
