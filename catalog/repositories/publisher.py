"""Publisher repository."""
from catalog.models.publisher import Publisher
from catalog.repositories.base import SoftDeleteRepository


class PublisherRepository(SoftDeleteRepository[Publisher]):
    """Data access for publishers."""

    model = Publisher
    resource_name = "Publisher"
    required_fields = ("name",)
