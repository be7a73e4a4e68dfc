"""Book service."""
from typing import Optional

from catalog.core.filters import ExactFilter
from catalog.core.validation import coerce_choices
from catalog.models.book import Book, Genre
from catalog.repositories.book import BookRepository
from catalog.services.base import CatalogService, PageResult


class BookService(CatalogService[Book]):
    """Service for book operations.

    Free-text search matches the title; genre, author and publisher are
    exact filters combined with it by AND.
    """

    repository_class = BookRepository
    search_field = "title"

    async def list_books(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        genre: Optional[Genre] = None,
        author_id: Optional[int] = None,
        publisher_id: Optional[int] = None,
    ) -> PageResult[Book]:
        """List active books with author and publisher names."""
        if genre is not None:
            genre = coerce_choices(
                self.resource_name, {"genre": genre}, self.repository.choice_fields
            )["genre"]
        return await self.list_page(
            page=page,
            page_size=page_size,
            search=search,
            filters=(
                ExactFilter("genre", genre),
                ExactFilter("author_id", author_id),
                ExactFilter("publisher_id", publisher_id),
            ),
        )
