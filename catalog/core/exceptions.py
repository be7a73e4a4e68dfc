"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication related errors."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, error_code="AUTH_ERROR")


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} with id {resource_id} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class ValidationError(AppException):
    """Validation errors."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        missing: Optional[list[str]] = None,
    ):
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if missing:
            details["missing"] = missing
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details=details,
        )

    @classmethod
    def missing_fields(cls, resource: str, missing: list[str]) -> "ValidationError":
        """Build the error raised when required fields are absent."""
        return cls(
            f"{resource} is missing required fields: {', '.join(missing)}",
            missing=missing,
        )


class ConstraintError(AppException):
    """Storage-level referential or uniqueness violations."""

    status_code = 400

    def __init__(self, resource: str, message: str = "Constraint violation"):
        super().__init__(
            f"{resource} violates a storage constraint: {message}",
            error_code="CONSTRAINT_ERROR",
            details={"resource": resource},
        )


class UnexpectedError(AppException):
    """Any other storage or runtime failure.

    The message is deliberately generic; the cause is logged where it is
    raised, not sent to the client.
    """

    status_code = 500

    def __init__(self, operation: str, resource: str):
        super().__init__(
            "Internal server error",
            error_code="UNEXPECTED_ERROR",
            details={"operation": operation, "resource": resource},
        )
