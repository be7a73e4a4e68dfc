"""Publisher service."""
from catalog.models.publisher import Publisher
from catalog.repositories.publisher import PublisherRepository
from catalog.services.base import CatalogService


class PublisherService(CatalogService[Publisher]):
    """Service for publisher operations."""

    repository_class = PublisherRepository
    search_field = "name"
