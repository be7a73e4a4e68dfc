"""Business logic services."""
from catalog.services.auth_service import AuthService
from catalog.services.author_service import AuthorService
from catalog.services.base import CatalogService, PageResult
from catalog.services.book_service import BookService
from catalog.services.publisher_service import PublisherService

__all__ = [
    "AuthService",
    "CatalogService",
    "PageResult",
    "AuthorService",
    "PublisherService",
    "BookService",
]
