"""Book Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, Field

from catalog.models.book import Genre
from catalog.schemas.common import BaseSchema, TimestampMixin


class BookBase(BaseModel):
    """Base book schema."""

    title: str = Field(..., min_length=1, max_length=255)
    author_id: int
    publisher_id: int
    isbn: str = Field(..., min_length=1, max_length=20)
    price: str = Field(..., min_length=1, max_length=20)
    stock: str = Field(..., min_length=1, max_length=10)
    year: int
    genre: Genre
    description: Optional[str] = None


class BookCreate(BookBase):
    """Schema for creating a book."""

    pass


class BookUpdate(BaseModel):
    """Schema for updating a book."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    author_id: Optional[int] = None
    publisher_id: Optional[int] = None
    isbn: Optional[str] = Field(None, min_length=1, max_length=20)
    price: Optional[str] = Field(None, min_length=1, max_length=20)
    stock: Optional[str] = Field(None, min_length=1, max_length=10)
    year: Optional[int] = None
    genre: Optional[Genre] = None
    description: Optional[str] = None


class BookResponse(BookBase, TimestampMixin, BaseSchema):
    """Schema for book response, enriched with related names."""

    id: int
    author_name: Optional[str] = None
    publisher_name: Optional[str] = None
