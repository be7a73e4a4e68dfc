"""Data access shared by every soft-deletable catalog resource."""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from catalog.core.exceptions import ConstraintError
from catalog.core.validation import coerce_choices, ensure_required

ModelT = TypeVar("ModelT")


class SoftDeleteRepository(Generic[ModelT]):
    """Count, page, fetch and mutate rows of one model.

    Reads and writes only ever touch active rows (``deleted_at IS NULL``);
    a ``None`` return from ``get_by_id``, ``update`` or ``soft_delete`` means
    there is no active row with that id.
    """

    model: type[ModelT]
    resource_name: str = "Resource"
    required_fields: tuple[str, ...] = ()
    choice_fields: dict[str, type[Enum]] = {}

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self) -> Select:
        """Base statement for row reads."""
        return select(self.model)

    async def _finalize(self, entity: ModelT) -> ModelT:
        """Hook run on rows returned from writes."""
        return entity

    async def count(self, criteria: ColumnElement[bool]) -> int:
        """Count rows matching ``criteria``."""
        query = select(func.count()).select_from(self.model).where(criteria)
        return (await self.db.execute(query)).scalar_one()

    async def select_page(
        self,
        criteria: ColumnElement[bool],
        limit: int,
        offset: int,
    ) -> list[ModelT]:
        """Fetch one page of rows matching ``criteria``, ordered by id."""
        query = (
            self._select()
            .where(criteria)
            .order_by(self.model.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Get an active row by ID."""
        result = await self.db.execute(
            self._select().where(
                self.model.id == entity_id,
                self.model.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def insert(self, fields: dict[str, Any]) -> ModelT:
        """Insert a new row and return it as stored."""
        ensure_required(self.resource_name, fields, self.required_fields)
        fields = coerce_choices(self.resource_name, fields, self.choice_fields)

        entity = self.model(**fields)
        self.db.add(entity)
        await self._flush()
        await self.db.refresh(entity)
        return await self._finalize(entity)

    async def update(self, entity_id: int, fields: dict[str, Any]) -> Optional[ModelT]:
        """Set the given fields on an active row."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return None

        fields = coerce_choices(self.resource_name, fields, self.choice_fields)
        for field, value in fields.items():
            setattr(entity, field, value)

        await self._flush()
        await self.db.refresh(entity)
        return await self._finalize(entity)

    async def soft_delete(self, entity_id: int) -> Optional[ModelT]:
        """Stamp ``deleted_at`` on an active row."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return None

        entity.deleted_at = datetime.now(timezone.utc)

        await self._flush()
        await self.db.refresh(entity)
        return await self._finalize(entity)

    async def _flush(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as exc:
            raise ConstraintError(self.resource_name, str(exc.orig)) from exc
