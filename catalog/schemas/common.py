"""Common Pydantic schemas."""
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class PageMetadata(BaseModel):
    """Pagination descriptors for one page of a listing."""

    current_page: int
    page_size: int
    total_records: int
    total_pages: int
    has_next: bool
    has_previous: bool


class DataResponse(BaseModel, Generic[DataT]):
    """Envelope around a single entity."""

    message: str
    data: Optional[DataT] = None


class PaginatedResponse(BaseModel, Generic[DataT]):
    """Envelope around one page of a listing."""

    message: str
    data: list[DataT]
    pagination: PageMetadata


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str
    error_code: Optional[str] = None
    details: dict[str, Any] = {}
