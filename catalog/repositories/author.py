"""Author repository."""
from catalog.models.author import Author
from catalog.repositories.base import SoftDeleteRepository


class AuthorRepository(SoftDeleteRepository[Author]):
    """Data access for authors."""

    model = Author
    resource_name = "Author"
    required_fields = ("name",)
