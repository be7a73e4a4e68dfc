"""Listing predicates: soft-delete exclusion, text search, exact filters.

Every listing in the catalog is filtered through :class:`FilterBuilder`. The
result is always a flat conjunction::

    deleted_at IS NULL
    [AND lower(<search field>) LIKE '%' || lower(:search) || '%']
    [AND <field> = :value ...]

There is no OR and no nesting. Wildcard characters typed by the user are
escaped, so ``search="50%"`` matches the literal text.
"""
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement


@dataclass(frozen=True)
class ExactFilter:
    """Equality predicate on one column; ``None`` values are skipped."""

    field: str
    value: Any


class FilterBuilder:
    """Builds listing predicates for one soft-deletable model."""

    def __init__(self, model: type, search_field: str):
        self.model = model
        self.search_field = search_field
        # Fail at construction rather than on the first search
        self._column(search_field)

    def _column(self, name: str):
        columns = self.model.__table__.columns
        if name not in columns:
            raise ValueError(
                f"{self.model.__name__} has no column named {name!r}"
            )
        return getattr(self.model, name)

    def build(
        self,
        search: Optional[str] = None,
        filters: Iterable[ExactFilter] = (),
    ) -> ColumnElement[bool]:
        """Return the conjunction for the given search and exact filters."""
        clauses = [self.model.deleted_at.is_(None)]

        if search:
            clauses.append(
                self._column(self.search_field).icontains(search, autoescape=True)
            )

        for exact in filters:
            if exact.value is None:
                continue
            clauses.append(self._column(exact.field) == exact.value)

        return and_(*clauses)
