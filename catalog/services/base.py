"""Orchestration shared by the author, publisher and book services."""
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import AppException, NotFoundError, UnexpectedError
from catalog.core.filters import ExactFilter, FilterBuilder
from catalog.core.logging import get_logger
from catalog.core.pagination import compute_pagination, normalize_page_params, page_offset
from catalog.core.validation import (
    coerce_choices,
    ensure_not_blank,
    ensure_required,
    ensure_valid_id,
)
from catalog.repositories.base import SoftDeleteRepository
from catalog.schemas.common import PageMetadata

ModelT = TypeVar("ModelT")

logger = get_logger("services")


@dataclass
class PageResult(Generic[ModelT]):
    """One page of a listing plus its metadata."""

    data: list[ModelT]
    pagination: PageMetadata


class CatalogService(Generic[ModelT]):
    """List/get/create/update/soft-delete for one catalog resource.

    Subclasses set ``repository_class`` and the column used for free-text
    search.
    """

    repository_class: type[SoftDeleteRepository]
    search_field: str = "name"

    def __init__(self, db: AsyncSession):
        self.repository = self.repository_class(db)
        self.resource_name = self.repository.resource_name
        self.filters = FilterBuilder(self.repository.model, self.search_field)

    @contextmanager
    def _storage_errors(self, operation: str, **context: Any) -> Iterator[None]:
        """Log unexpected storage failures and hide their details."""
        try:
            yield
        except AppException:
            raise
        except SQLAlchemyError as exc:
            logger.exception(
                f"{operation} failed for {self.resource_name} ({context}): {exc}"
            )
            raise UnexpectedError(operation, self.resource_name) from exc

    async def list_page(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        filters: Iterable[ExactFilter] = (),
    ) -> PageResult[ModelT]:
        """List active rows matching ``search`` and ``filters``."""
        page, page_size = normalize_page_params(page, page_size)
        criteria = self.filters.build(search=search, filters=filters)

        # count and select run without a shared snapshot
        with self._storage_errors("list", page=page, page_size=page_size, search=search):
            total = await self.repository.count(criteria)
            pagination = compute_pagination(total, page, page_size)
            rows = await self.repository.select_page(
                criteria,
                limit=page_size,
                offset=page_offset(page, page_size),
            )

        return PageResult(data=rows, pagination=pagination)

    async def get_by_id(self, entity_id: int) -> ModelT:
        """Get an active row or raise NotFoundError."""
        entity_id = ensure_valid_id(self.resource_name, entity_id)

        with self._storage_errors("get", id=entity_id):
            entity = await self.repository.get_by_id(entity_id)

        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity

    async def create(self, fields: dict[str, Any]) -> ModelT:
        """Create a row and return it in full."""
        ensure_required(self.resource_name, fields, self.repository.required_fields)
        fields = coerce_choices(
            self.resource_name, fields, self.repository.choice_fields
        )

        with self._storage_errors("create"):
            entity = await self.repository.insert(fields)

        logger.info(f"Created {self.resource_name} id={entity.id}")
        return entity

    async def update(self, entity_id: int, fields: dict[str, Any]) -> ModelT:
        """Set the supplied fields on an active row.

        Omitted fields keep their stored values; required fields that are
        supplied must not be blank.
        """
        entity_id = ensure_valid_id(self.resource_name, entity_id)
        ensure_not_blank(self.resource_name, fields, self.repository.required_fields)
        fields = coerce_choices(
            self.resource_name, fields, self.repository.choice_fields
        )

        with self._storage_errors("update", id=entity_id):
            entity = await self.repository.update(entity_id, fields)

        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        logger.info(f"Updated {self.resource_name} id={entity_id}")
        return entity

    async def soft_delete(self, entity_id: int) -> ModelT:
        """Mark an active row deleted and return it."""
        entity_id = ensure_valid_id(self.resource_name, entity_id)

        with self._storage_errors("delete", id=entity_id):
            entity = await self.repository.soft_delete(entity_id)

        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        logger.info(f"Soft-deleted {self.resource_name} id={entity_id}")
        return entity
