"""Author service."""
from catalog.models.author import Author
from catalog.repositories.author import AuthorRepository
from catalog.services.base import CatalogService


class AuthorService(CatalogService[Author]):
    """Service for author operations."""

    repository_class = AuthorRepository
    search_field = "name"
