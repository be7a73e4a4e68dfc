"""Core utilities."""
from catalog.core.exceptions import (
    AppException,
    AuthenticationError,
    ConstraintError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from catalog.core.filters import ExactFilter, FilterBuilder
from catalog.core.pagination import compute_pagination, normalize_page_params
from catalog.core.security import (
    create_access_token,
    decode_token,
    get_current_user,
    get_password_hash,
    verify_password,
)

__all__ = [
    # Security
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "decode_token",
    "get_current_user",
    # Listing
    "ExactFilter",
    "FilterBuilder",
    "compute_pagination",
    "normalize_page_params",
    # Exceptions
    "AppException",
    "AuthenticationError",
    "ConstraintError",
    "NotFoundError",
    "UnexpectedError",
    "ValidationError",
]
