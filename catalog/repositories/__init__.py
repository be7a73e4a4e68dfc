"""Data access layer for catalog resources."""
from catalog.repositories.author import AuthorRepository
from catalog.repositories.base import SoftDeleteRepository
from catalog.repositories.book import BookRepository
from catalog.repositories.publisher import PublisherRepository

__all__ = [
    "SoftDeleteRepository",
    "AuthorRepository",
    "PublisherRepository",
    "BookRepository",
]
