"""Author Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, Field

from catalog.schemas.common import BaseSchema, TimestampMixin


class AuthorBase(BaseModel):
    """Base author schema."""

    name: str = Field(..., min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)


class AuthorCreate(AuthorBase):
    """Schema for creating an author."""

    pass


class AuthorUpdate(BaseModel):
    """Schema for updating an author.

    Only the fields present in the request body are written.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)


class AuthorResponse(AuthorBase, TimestampMixin, BaseSchema):
    """Schema for author response."""

    id: int
