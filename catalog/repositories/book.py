"""Book repository with author/publisher name enrichment."""
from sqlalchemy import Select, and_, select
from sqlalchemy.orm import with_expression

from catalog.models.author import Author
from catalog.models.book import Book, Genre
from catalog.models.publisher import Publisher
from catalog.repositories.base import SoftDeleteRepository


class BookRepository(SoftDeleteRepository[Book]):
    """Data access for books.

    Every row read back carries ``author_name`` and ``publisher_name`` from a
    left outer join on the referenced author and publisher. The join only
    matches active rows, so a book whose author was soft-deleted is still
    returned, just with ``author_name=None``.
    """

    model = Book
    resource_name = "Book"
    required_fields = (
        "title",
        "author_id",
        "publisher_id",
        "isbn",
        "price",
        "stock",
        "year",
        "genre",
    )
    choice_fields = {"genre": Genre}

    def _select(self) -> Select:
        return (
            select(Book)
            .outerjoin(
                Author,
                and_(Book.author_id == Author.id, Author.deleted_at.is_(None)),
            )
            .outerjoin(
                Publisher,
                and_(Book.publisher_id == Publisher.id, Publisher.deleted_at.is_(None)),
            )
            .options(
                with_expression(Book.author_name, Author.name),
                with_expression(Book.publisher_name, Publisher.name),
            )
            # Books already in the session must pick up fresh names too
            .execution_options(populate_existing=True)
        )

    async def _finalize(self, entity: Book) -> Book:
        # Not filtered on deleted_at: soft_delete returns the deleted row
        result = await self.db.execute(self._select().where(Book.id == entity.id))
        return result.scalar_one()
