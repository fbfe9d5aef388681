"""Incremental assembly of a conjunctive predicate from optional filter values."""

from __future__ import annotations

from typing import Any

from operations.filters.parsing import parse_datetime
from operations.filters.predicates import And, AnyOf, Equals, Predicate, Range, conjunction
from operations.utils.logging import get_logger

logger = get_logger(__name__)


class PredicateBuilder:
    """Collect leaf predicates, skipping absent values.

    Usage::

        predicate = (
            PredicateBuilder(date_format)
            .equals("currency", "USD")
            .any_of(("payer_party_id", "payee_party_id"), party_id)
            .started_between(start_from, start_to)
            .build()
        )
    """

    def __init__(self, date_format: str, date_field: str = "started_at") -> None:
        self.date_format = date_format
        self.date_field = date_field
        self._predicates: list[Predicate] = []

    def equals(self, field: str, value: Any) -> PredicateBuilder:
        if value is not None:
            self._predicates.append(Equals(field, value))
        return self

    def any_of(self, fields: tuple[str, ...], value: Any) -> PredicateBuilder:
        if value is not None:
            self._predicates.append(AnyOf(fields, value))
        return self

    def started_between(self, start_from: str | None, start_to: str | None) -> PredicateBuilder:
        """Add the date range; an unparseable bound drops the whole range."""
        if start_from is None and start_to is None:
            return self
        try:
            lower = parse_datetime(start_from, self.date_format) if start_from else None
            upper = parse_datetime(start_to, self.date_format) if start_to else None
        except ValueError:
            logger.warning("failed to parse dates %s / %s", start_from, start_to)
            return self
        if lower is not None or upper is not None:
            self._predicates.append(Range(self.date_field, lower=lower, upper=upper))
        return self

    def add(self, predicate: Predicate | None) -> PredicateBuilder:
        if isinstance(predicate, And):
            self._predicates.extend(predicate.children)
        elif predicate is not None:
            self._predicates.append(predicate)
        return self

    def build(self) -> Predicate | None:
        """Return the AND of everything collected; ``None`` matches all rows."""
        return conjunction(self._predicates)
