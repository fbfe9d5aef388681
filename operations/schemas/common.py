"""Common schemas shared across the API."""

import enum
from math import ceil

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises snake_case fields under camelCase names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SortDirection(enum.StrEnum):
    asc = "ASC"
    desc = "DESC"


SORT_ORDER_PATTERN = "(?i)^(asc|desc)$"


class PageRequest(BaseModel):
    """Zero-based page selection plus sort order."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, gt=0)
    sort_field: str | None = None
    sort_direction: SortDirection = SortDirection.desc

    @property
    def offset(self) -> int:
        return self.page * self.size


class PaginatedResponse(CamelModel):
    """Base paginated response."""

    total_elements: int
    total_pages: int
    number: int
    size: int

    @classmethod
    def paginate(cls, *, content: list, total: int, page: int, size: int, **kwargs):
        """Build a paginated response with automatic page count."""
        return cls(
            content=content,
            total_elements=total,
            number=page,
            size=size,
            total_pages=ceil(total / size) if size > 0 else 0,
            **kwargs,
        )


class ErrorResponse(CamelModel):
    """Structured error body returned by the export endpoint."""

    error_code: str
    error_description: str
    developer_message: str
