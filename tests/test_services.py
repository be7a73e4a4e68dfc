"""Service and repository tests against a real SQLite session."""
import pytest
from sqlalchemy.exc import OperationalError

from catalog.core.exceptions import (
    ConstraintError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from catalog.models import Genre
from catalog.repositories import AuthorRepository, BookRepository
from catalog.services import AuthorService, BookService, PublisherService


def book_fields(author_id: int, publisher_id: int, **overrides) -> dict:
    fields = {
        "title": "T",
        "author_id": author_id,
        "publisher_id": publisher_id,
        "isbn": "123",
        "price": "9.99",
        "stock": "5",
        "year": 2020,
        "genre": Genre.FICTION,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
async def author(db_session):
    return await AuthorService(db_session).create({"name": "A. Poe", "bio": "writer"})


@pytest.fixture
async def publisher(db_session):
    return await PublisherService(db_session).create(
        {"name": "P", "address": "X", "phone": "1"}
    )


@pytest.mark.asyncio
async def test_end_to_end_book_listing(db_session, author, publisher):
    books = BookService(db_session)
    await books.create(book_fields(author.id, publisher.id))

    result = await books.list_books(search="T")

    assert len(result.data) == 1
    book = result.data[0]
    assert book.title == "T"
    assert book.author_name == "A. Poe"
    assert book.publisher_name == "P"
    assert result.pagination.total_records == 1
    assert result.pagination.total_pages == 1


@pytest.mark.asyncio
async def test_create_returns_full_row(db_session, author, publisher):
    book = await BookService(db_session).create(book_fields(author.id, publisher.id))
    assert book.id is not None
    assert book.created_at is not None
    assert book.deleted_at is None
    assert book.author_name == "A. Poe"
    assert book.publisher_name == "P"


@pytest.mark.asyncio
async def test_create_lists_missing_fields(db_session):
    with pytest.raises(ValidationError) as exc_info:
        await BookService(db_session).create({"title": "T", "isbn": ""})
    missing = exc_info.value.details["missing"]
    assert missing == ["author_id", "publisher_id", "isbn", "price", "stock", "year", "genre"]


@pytest.mark.asyncio
async def test_repository_insert_checks_required_fields(db_session):
    with pytest.raises(ValidationError):
        await AuthorRepository(db_session).insert({"bio": "no name"})


@pytest.mark.asyncio
async def test_book_with_unknown_author_is_constraint_error(db_session, publisher):
    with pytest.raises(ConstraintError):
        await BookService(db_session).create(book_fields(9999, publisher.id))


@pytest.mark.asyncio
async def test_list_excludes_soft_deleted(db_session):
    authors = AuthorService(db_session)
    for name in ("Ann", "Bob", "Cid"):
        await authors.create({"name": name})
    first = (await authors.list_page()).data[0]
    await authors.soft_delete(first.id)

    result = await authors.list_page()

    assert [a.name for a in result.data] == ["Bob", "Cid"]
    assert result.pagination.total_records == 2


@pytest.mark.asyncio
async def test_all_rows_soft_deleted(db_session, author):
    authors = AuthorService(db_session)
    await authors.soft_delete(author.id)

    result = await authors.list_page()

    assert result.data == []
    assert result.pagination.total_records == 0
    assert result.pagination.total_pages == 0
    assert result.pagination.has_next is False


@pytest.mark.asyncio
async def test_empty_search_equals_no_search(db_session):
    authors = AuthorService(db_session)
    for name in ("Ann", "Bob"):
        await authors.create({"name": name})

    with_empty = await authors.list_page(search="")
    without = await authors.list_page()

    assert [a.id for a in with_empty.data] == [a.id for a in without.data]
    assert with_empty.pagination == without.pagination


@pytest.mark.asyncio
async def test_requested_page_size_bounds_the_page(db_session):
    authors = AuthorService(db_session)
    for i in range(25):
        await authors.create({"name": f"Author {i:02d}"})

    page_two = await authors.list_page(page=2, page_size=10)
    page_three = await authors.list_page(page=3, page_size=10)
    past_end = await authors.list_page(page=4, page_size=10)

    assert [a.name for a in page_two.data] == [f"Author {i:02d}" for i in range(10, 20)]
    assert page_two.pagination.has_next is True
    assert page_two.pagination.has_previous is True
    assert len(page_three.data) == 5
    assert page_three.pagination.has_next is False
    assert past_end.data == []
    assert past_end.pagination.total_pages == 3


@pytest.mark.asyncio
async def test_list_rejects_bad_page_params(db_session):
    with pytest.raises(ValidationError):
        await AuthorService(db_session).list_page(page=0)
    with pytest.raises(ValidationError):
        await AuthorService(db_session).list_page(page_size=-1)


@pytest.mark.asyncio
async def test_get_by_id_validation_and_not_found(db_session, author):
    authors = AuthorService(db_session)
    assert (await authors.get_by_id(author.id)).name == "A. Poe"

    with pytest.raises(ValidationError):
        await authors.get_by_id(None)
    with pytest.raises(ValidationError):
        await authors.get_by_id("1")
    with pytest.raises(ValidationError):
        await authors.get_by_id(0)
    with pytest.raises(NotFoundError):
        await authors.get_by_id(author.id + 100)


@pytest.mark.asyncio
async def test_update_sets_only_supplied_fields(db_session, author):
    updated = await AuthorService(db_session).update(author.id, {"bio": "poet"})
    assert updated.name == "A. Poe"
    assert updated.bio == "poet"


@pytest.mark.asyncio
async def test_update_rejects_blank_required_field(db_session, author):
    with pytest.raises(ValidationError):
        await AuthorService(db_session).update(author.id, {"name": "  "})


@pytest.mark.asyncio
async def test_update_never_resurrects(db_session, author):
    authors = AuthorService(db_session)
    await authors.soft_delete(author.id)

    with pytest.raises(NotFoundError):
        await authors.update(author.id, {"name": "Back"})
    with pytest.raises(NotFoundError):
        await authors.get_by_id(author.id)


@pytest.mark.asyncio
async def test_soft_delete_twice_is_not_found(db_session, author):
    authors = AuthorService(db_session)
    deleted = await authors.soft_delete(author.id)
    assert deleted.deleted_at is not None

    with pytest.raises(NotFoundError):
        await authors.soft_delete(author.id)


@pytest.mark.asyncio
async def test_soft_deleted_book_returned_with_names(db_session, author, publisher):
    books = BookService(db_session)
    book = await books.create(book_fields(author.id, publisher.id))

    deleted = await books.soft_delete(book.id)

    assert deleted.deleted_at is not None
    assert deleted.author_name == "A. Poe"


@pytest.mark.asyncio
async def test_dangling_reference_keeps_book_with_null_name(db_session, author, publisher):
    books = BookService(db_session)
    book = await books.create(book_fields(author.id, publisher.id))
    await AuthorService(db_session).soft_delete(author.id)

    result = await books.list_books()

    assert [b.id for b in result.data] == [book.id]
    assert result.data[0].author_name is None
    assert result.data[0].publisher_name == "P"


@pytest.mark.asyncio
async def test_book_update_refreshes_enrichment(db_session, author, publisher):
    other = await AuthorService(db_session).create({"name": "M. Shelley"})
    books = BookService(db_session)
    book = await books.create(book_fields(author.id, publisher.id))

    updated = await books.update(book.id, {"author_id": other.id})

    assert updated.author_name == "M. Shelley"


@pytest.mark.asyncio
async def test_book_genre_filter_and_title_search(db_session, author, publisher):
    books = BookService(db_session)
    await books.create(book_fields(author.id, publisher.id, title="Dune", genre=Genre.SCIENCE_FICTION))
    await books.create(book_fields(author.id, publisher.id, title="Dune Notes", genre=Genre.NON_FICTION))
    await books.create(book_fields(author.id, publisher.id, title="Emma", genre=Genre.SCIENCE_FICTION))

    by_genre = await books.list_books(genre=Genre.SCIENCE_FICTION)
    by_both = await books.list_books(search="dune", genre=Genre.SCIENCE_FICTION)

    assert sorted(b.title for b in by_genre.data) == ["Dune", "Emma"]
    assert [b.title for b in by_both.data] == ["Dune"]
    assert by_both.pagination.total_records == 1


@pytest.mark.asyncio
async def test_create_book_rejects_unknown_genre(db_session, author, publisher):
    books = BookService(db_session)

    with pytest.raises(ValidationError) as exc_info:
        await books.create(book_fields(author.id, publisher.id, genre="bogus"))
    assert exc_info.value.details["field"] == "genre"

    # nothing was stored, so listings keep working
    result = await books.list_books()
    assert result.data == []
    assert result.pagination.total_records == 0


@pytest.mark.asyncio
async def test_repository_insert_rejects_unknown_genre(db_session, author, publisher):
    with pytest.raises(ValidationError):
        await BookRepository(db_session).insert(
            book_fields(author.id, publisher.id, genre="bogus")
        )


@pytest.mark.asyncio
async def test_update_book_rejects_unknown_genre(db_session, author, publisher):
    books = BookService(db_session)
    book = await books.create(book_fields(author.id, publisher.id))

    with pytest.raises(ValidationError):
        await books.update(book.id, {"genre": "bogus"})

    stored = await books.get_by_id(book.id)
    assert stored.genre is Genre.FICTION


@pytest.mark.asyncio
async def test_genre_given_as_string_is_stored_as_member(db_session, author, publisher):
    books = BookService(db_session)
    book = await books.create(book_fields(author.id, publisher.id, genre="romance"))
    assert book.genre is Genre.ROMANCE

    result = await books.list_books(genre="romance")
    assert [b.id for b in result.data] == [book.id]

    with pytest.raises(ValidationError):
        await books.list_books(genre="bogus")


@pytest.mark.asyncio
async def test_book_filter_by_author(db_session, author, publisher):
    other = await AuthorService(db_session).create({"name": "M. Shelley"})
    books = BookService(db_session)
    await books.create(book_fields(author.id, publisher.id, title="Raven"))
    await books.create(book_fields(other.id, publisher.id, title="Frankenstein"))

    result = await books.list_books(author_id=other.id)

    assert [b.title for b in result.data] == ["Frankenstein"]


@pytest.mark.asyncio
async def test_storage_failure_becomes_unexpected_error(db_session, monkeypatch):
    service = AuthorService(db_session)

    async def broken_count(criteria):
        raise OperationalError("SELECT count(*)", {}, Exception("connection lost"))

    monkeypatch.setattr(service.repository, "count", broken_count)

    with pytest.raises(UnexpectedError) as exc_info:
        await service.list_page()
    assert exc_info.value.status_code == 500
    assert "connection lost" not in exc_info.value.message


@pytest.mark.asyncio
async def test_book_repository_count_ignores_joins(db_session, author, publisher):
    repo = BookRepository(db_session)
    books = BookService(db_session)
    await books.create(book_fields(author.id, publisher.id))
    await books.create(book_fields(author.id, publisher.id, title="U"))

    assert await repo.count(books.filters.build()) == 2
