"""Author API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.security import get_current_user
from catalog.database import get_db
from catalog.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from catalog.schemas.common import DataResponse, PaginatedResponse
from catalog.services.author_service import AuthorService

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    dependencies=[Depends(get_current_user)],
)


def get_author_service(db: AsyncSession = Depends(get_db)) -> AuthorService:
    """Dependency provider for AuthorService."""
    return AuthorService(db)


@router.get("", response_model=PaginatedResponse[AuthorResponse])
async def list_authors(
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, description="Rows per page"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name"),
    service: AuthorService = Depends(get_author_service),
) -> dict:
    """List active authors."""
    result = await service.list_page(page=page, page_size=limit, search=search)
    return {
        "message": "Authors retrieved successfully",
        "data": result.data,
        "pagination": result.pagination,
    }


@router.get("/{author_id}", response_model=DataResponse[AuthorResponse])
async def get_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> dict:
    """Get a specific author."""
    author = await service.get_by_id(author_id)
    return {"message": "Author retrieved successfully", "data": author}


@router.post(
    "",
    response_model=DataResponse[AuthorResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_author(
    author_data: AuthorCreate,
    service: AuthorService = Depends(get_author_service),
) -> dict:
    """Create a new author."""
    author = await service.create(author_data.model_dump())
    return {"message": "Author created successfully", "data": author}


@router.put("/{author_id}", response_model=DataResponse[AuthorResponse])
async def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> dict:
    """Update an author."""
    author = await service.update(author_id, author_data.model_dump(exclude_unset=True))
    return {"message": "Author updated successfully", "data": author}


@router.delete("/{author_id}", response_model=DataResponse[AuthorResponse])
async def delete_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> dict:
    """Soft-delete an author."""
    author = await service.soft_delete(author_id)
    return {"message": "Author deleted successfully", "data": author}
