"""Shared paginated query execution for read-only record repositories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from pydantic.alias_generators import to_snake
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from operations.exceptions import UnknownSortFieldError
from operations.filters.predicates import Predicate
from operations.models.base import Base
from operations.schemas.common import PageRequest, SortDirection

ModelT = TypeVar("ModelT", bound=Base)

DEFAULT_SORT_FIELD = "started_at"


@dataclass
class Page(Generic[ModelT]):
    """One page of query results."""

    content: list[ModelT] = field(default_factory=list)
    total: int = 0
    number: int = 0
    size: int = 0


class RecordRepository(Generic[ModelT]):
    """Run predicate queries against a single table with paging and sorting."""

    model: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _sort_column(self, sort_field: str | None) -> Any:
        if sort_field is None or sort_field in ("startedAt", DEFAULT_SORT_FIELD):
            return self.model.__table__.c[DEFAULT_SORT_FIELD]
        try:
            return self.model.__table__.c[to_snake(sort_field)]
        except KeyError:
            raise UnknownSortFieldError(sort_field, self.model.__tablename__) from None

    async def find_all(
        self, predicate: Predicate | None, page_request: PageRequest
    ) -> Page[ModelT]:
        """Return one sorted page of rows matching ``predicate`` (all rows if ``None``)."""
        sort_column = self._sort_column(page_request.sort_field)
        query = select(self.model)
        count_query = select(func.count()).select_from(self.model)

        if predicate is not None:
            clause = predicate.to_clause(self.model)
            query = query.where(clause)
            count_query = count_query.where(clause)

        total = (await self.session.execute(count_query)).scalar() or 0

        if page_request.sort_direction == SortDirection.asc:
            query = query.order_by(sort_column.asc())
        else:
            query = query.order_by(sort_column.desc())
        query = query.offset(page_request.offset).limit(page_request.size)

        result = await self.session.execute(query)
        return Page(
            content=list(result.scalars().all()),
            total=total,
            number=page_request.page,
            size=page_request.size,
        )
