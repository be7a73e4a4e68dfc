"""Page metadata calculation and pagination input normalization."""
from typing import Optional

from catalog.config import settings
from catalog.core.exceptions import ValidationError
from catalog.schemas.common import PageMetadata

# Largest offset a signed 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1


def compute_pagination(total_records: int, page: int, page_size: int) -> PageMetadata:
    """Describe ``page`` of a listing holding ``total_records`` rows.

    ``page`` is not clamped to the last page: asking past the end gives
    ``has_next=False`` and the caller simply gets an empty slice.
    """
    if page_size < 1:
        raise ValidationError("Page size must be a positive integer", field="limit")
    if page < 1:
        raise ValidationError("Page must be a positive integer", field="page")
    if total_records < 0:
        raise ValidationError("Total records cannot be negative", field="total_records")

    total_pages = (total_records + page_size - 1) // page_size
    return PageMetadata(
        current_page=page,
        page_size=page_size,
        total_records=total_records,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )


def normalize_page_params(
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> tuple[int, int]:
    """Apply defaults to missing values and reject out-of-range ones."""
    if page is None:
        page = 1
    if page_size is None:
        page_size = settings.default_page_size

    if page < 1:
        raise ValidationError("Page must be a positive integer", field="page")
    if page_size < 1:
        raise ValidationError("Limit must be a positive integer", field="limit")
    if page_size > settings.max_page_size:
        raise ValidationError(
            f"Limit cannot exceed {settings.max_page_size}", field="limit"
        )
    if page_offset(page, page_size) > MAX_OFFSET:
        raise ValidationError("Page is out of range", field="page")
    return page, page_size


def page_offset(page: int, page_size: int) -> int:
    """Row offset of the first record on ``page``."""
    return (page - 1) * page_size
