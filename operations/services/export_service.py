"""Bulk export of transaction requests matched by several id-list filters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from operations.exceptions import InvalidFilterError
from operations.filters.parsing import ExportFilter, parse_export_filter, parse_states
from operations.filters.predicates import In, Predicate
from operations.models.transaction_request import TransactionRequest
from operations.repositories.transaction_request_repository import TransactionRequestRepository
from operations.schemas.common import PageRequest
from operations.utils.logging import get_logger

logger = get_logger(__name__)


def quoted_variants(descriptions: list[str]) -> list[str]:
    """Add a double-quoted copy of each description.

    Upstream systems sometimes store the description JSON-encoded, so
    ``AMS Local is disabled`` must also match the stored form wrapped in
    double quotes.
    """
    return list(descriptions) + [f'"{d}"' for d in descriptions]


@dataclass(frozen=True)
class FieldLookup:
    """Column an export filter matches against and how its values are prepared."""

    field: str
    transform: Callable[[list[str]], list[Any]] = list


EXPORT_LOOKUPS: dict[ExportFilter, FieldLookup] = {
    ExportFilter.transaction_id: FieldLookup("transaction_id"),
    ExportFilter.payer_id: FieldLookup("payer_party_id"),
    ExportFilter.payee_id: FieldLookup("payee_party_id"),
    ExportFilter.workflow_instance_key: FieldLookup("workflow_instance_key"),
    ExportFilter.state: FieldLookup("state", parse_states),
    ExportFilter.error_description: FieldLookup("error_description", quoted_variants),
    ExportFilter.external_id: FieldLookup("external_id"),
}


@dataclass
class ExportResult:
    """Concatenated matches of every filter plus the keys that were rejected."""

    records: list[TransactionRequest] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)


class ExportService:
    """Resolve each export filter independently and merge the resulting rows."""

    def __init__(self, repo: TransactionRequestRepository) -> None:
        self.repo = repo

    def lookup_predicate(
        self, export_filter: ExportFilter, values: list[str], shared: Predicate | None
    ) -> Predicate | None:
        """Build ``field IN values`` for one filter, ANDed with ``shared``.

        Returns ``None`` when no value survives parsing.
        """
        lookup = EXPORT_LOOKUPS[export_filter]
        prepared = lookup.transform(values)
        if not prepared:
            return None
        predicate: Predicate = In(lookup.field, tuple(prepared))
        if shared is not None:
            predicate = predicate & shared
        return predicate

    async def export(
        self,
        body: dict[str, list[str]],
        shared: Predicate | None,
        page_request: PageRequest,
    ) -> ExportResult:
        """Query once per non-empty body key and concatenate the pages.

        Keys are processed in body order. A record matched by two keys appears
        twice. Unknown keys are logged and collected on ``ExportResult.errors``.
        """
        result = ExportResult()
        for filter_name, values in body.items():
            if not values:
                continue
            try:
                export_filter = parse_export_filter(filter_name)
            except InvalidFilterError as exc:
                logger.info("Unable to parse filter %s: %s", filter_name, exc.to_dict())
                result.errors.append(exc.to_dict())
                continue
            logger.info("Filter parsed successfully %s", export_filter.name)

            predicate = self.lookup_predicate(export_filter, values, shared)
            if predicate is None:
                logger.warning("No usable values for filter %s, skipping it", filter_name)
                continue

            page = await self.repo.find_all(predicate, page_request)
            logger.info(
                "Export filter %s matched %d of %d rows", filter_name, len(page.content), page.total
            )
            result.records.extend(page.content)
        return result
