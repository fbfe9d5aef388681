"""Composable predicate nodes translated to SQLAlchemy clauses.

A predicate names model attributes by their Python name and is rendered
against a concrete ORM model with :meth:`Predicate.to_clause`::

    predicate = And((Equals("currency", "USD"), Range("started_at", lower=since)))
    query = select(Transfer).where(predicate.to_clause(Transfer))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement


class Predicate(ABC):
    """Base class for predicate nodes."""

    @abstractmethod
    def to_clause(self, model: type) -> ColumnElement[bool]:
        """Render this predicate as a WHERE clause over ``model``."""

    def __and__(self, other: Predicate) -> And:
        left = self.children if isinstance(self, And) else (self,)
        right = other.children if isinstance(other, And) else (other,)
        return And(left + right)


def _column(model: type, field: str):
    try:
        return getattr(model, field)
    except AttributeError:
        raise ValueError(f"{model.__name__} has no field {field!r}") from None


@dataclass(frozen=True)
class Equals(Predicate):
    field: str
    value: Any

    def to_clause(self, model: type) -> ColumnElement[bool]:
        return _column(model, self.field) == self.value


@dataclass(frozen=True)
class AnyOf(Predicate):
    """``value`` equals at least one of ``fields``."""

    fields: tuple[str, ...]
    value: Any

    def to_clause(self, model: type) -> ColumnElement[bool]:
        return or_(*(_column(model, f) == self.value for f in self.fields))


@dataclass(frozen=True)
class Range(Predicate):
    """Inclusive range; a missing bound leaves that side open."""

    field: str
    lower: Any = None
    upper: Any = None

    def __post_init__(self) -> None:
        if self.lower is None and self.upper is None:
            raise ValueError("Range needs at least one bound")

    def to_clause(self, model: type) -> ColumnElement[bool]:
        column = _column(model, self.field)
        if self.lower is not None and self.upper is not None:
            return column.between(self.lower, self.upper)
        if self.lower is not None:
            return column >= self.lower
        return column <= self.upper


@dataclass(frozen=True)
class In(Predicate):
    field: str
    values: tuple[Any, ...]

    def to_clause(self, model: type) -> ColumnElement[bool]:
        return _column(model, self.field).in_(self.values)


@dataclass(frozen=True)
class And(Predicate):
    children: tuple[Predicate, ...]

    def to_clause(self, model: type) -> ColumnElement[bool]:
        if not self.children:
            return true()
        return and_(*(child.to_clause(model) for child in self.children))


def conjunction(predicates: Sequence[Predicate]) -> Predicate | None:
    """AND the given predicates together; ``None`` when there are none."""
    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    return And(tuple(predicates))
