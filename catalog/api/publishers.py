"""Publisher API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.security import get_current_user
from catalog.database import get_db
from catalog.schemas.common import DataResponse, PaginatedResponse
from catalog.schemas.publisher import PublisherCreate, PublisherResponse, PublisherUpdate
from catalog.services.publisher_service import PublisherService

router = APIRouter(
    prefix="/publishers",
    tags=["Publishers"],
    dependencies=[Depends(get_current_user)],
)


def get_publisher_service(db: AsyncSession = Depends(get_db)) -> PublisherService:
    """Dependency provider for PublisherService."""
    return PublisherService(db)


@router.get("", response_model=PaginatedResponse[PublisherResponse])
async def list_publishers(
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, description="Rows per page"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name"),
    service: PublisherService = Depends(get_publisher_service),
) -> dict:
    """List active publishers."""
    result = await service.list_page(page=page, page_size=limit, search=search)
    return {
        "message": "Publishers retrieved successfully",
        "data": result.data,
        "pagination": result.pagination,
    }


@router.get("/{publisher_id}", response_model=DataResponse[PublisherResponse])
async def get_publisher(
    publisher_id: int,
    service: PublisherService = Depends(get_publisher_service),
) -> dict:
    """Get a specific publisher."""
    publisher = await service.get_by_id(publisher_id)
    return {"message": "Publisher retrieved successfully", "data": publisher}


@router.post(
    "",
    response_model=DataResponse[PublisherResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_publisher(
    publisher_data: PublisherCreate,
    service: PublisherService = Depends(get_publisher_service),
) -> dict:
    """Create a new publisher."""
    publisher = await service.create(publisher_data.model_dump())
    return {"message": "Publisher created successfully", "data": publisher}


@router.put("/{publisher_id}", response_model=DataResponse[PublisherResponse])
async def update_publisher(
    publisher_id: int,
    publisher_data: PublisherUpdate,
    service: PublisherService = Depends(get_publisher_service),
) -> dict:
    """Update a publisher."""
    publisher = await service.update(
        publisher_id, publisher_data.model_dump(exclude_unset=True)
    )
    return {"message": "Publisher updated successfully", "data": publisher}


@router.delete("/{publisher_id}", response_model=DataResponse[PublisherResponse])
async def delete_publisher(
    publisher_id: int,
    service: PublisherService = Depends(get_publisher_service),
) -> dict:
    """Soft-delete a publisher."""
    publisher = await service.soft_delete(publisher_id)
    return {"message": "Publisher deleted successfully", "data": publisher}
