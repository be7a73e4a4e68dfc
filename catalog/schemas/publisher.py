"""Publisher Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, Field

from catalog.schemas.common import BaseSchema, TimestampMixin


class PublisherBase(BaseModel):
    """Base publisher schema."""

    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)


class PublisherCreate(PublisherBase):
    """Schema for creating a publisher."""

    pass


class PublisherUpdate(BaseModel):
    """Schema for updating a publisher."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)


class PublisherResponse(PublisherBase, TimestampMixin, BaseSchema):
    """Schema for publisher response."""

    id: int
