"""Book API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.security import get_current_user
from catalog.database import get_db
from catalog.models.book import Genre
from catalog.schemas.book import BookCreate, BookResponse, BookUpdate
from catalog.schemas.common import DataResponse, PaginatedResponse
from catalog.services.book_service import BookService

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    dependencies=[Depends(get_current_user)],
)


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """Dependency provider for BookService."""
    return BookService(db)


@router.get("", response_model=PaginatedResponse[BookResponse])
async def list_books(
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, description="Rows per page"),
    search: Optional[str] = Query(None, description="Case-insensitive match on title"),
    genre: Optional[Genre] = Query(None, description="Exact genre"),
    author_id: Optional[int] = None,
    publisher_id: Optional[int] = None,
    service: BookService = Depends(get_book_service),
) -> dict:
    """List active books with author and publisher names."""
    result = await service.list_books(
        page=page,
        page_size=limit,
        search=search,
        genre=genre,
        author_id=author_id,
        publisher_id=publisher_id,
    )
    return {
        "message": "Books retrieved successfully",
        "data": result.data,
        "pagination": result.pagination,
    }


@router.get("/{book_id}", response_model=DataResponse[BookResponse])
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> dict:
    """Get a specific book."""
    book = await service.get_by_id(book_id)
    return {"message": "Book retrieved successfully", "data": book}


@router.post(
    "",
    response_model=DataResponse[BookResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    book_data: BookCreate,
    service: BookService = Depends(get_book_service),
) -> dict:
    """Create a new book."""
    book = await service.create(book_data.model_dump())
    return {"message": "Book created successfully", "data": book}


@router.put("/{book_id}", response_model=DataResponse[BookResponse])
async def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> dict:
    """Update a book."""
    book = await service.update(book_id, book_data.model_dump(exclude_unset=True))
    return {"message": "Book updated successfully", "data": book}


@router.delete("/{book_id}", response_model=DataResponse[BookResponse])
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> dict:
    """Soft-delete a book."""
    book = await service.soft_delete(book_id)
    return {"message": "Book deleted successfully", "data": book}
