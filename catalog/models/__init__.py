"""SQLAlchemy models."""
from catalog.models.author import Author
from catalog.models.book import Book, Genre
from catalog.models.publisher import Publisher
from catalog.models.user import User

__all__ = [
    # User
    "User",
    # Catalog
    "Author",
    "Publisher",
    "Book",
    "Genre",
]
