"""Lenient parsing of raw query strings into enums, dates and identifiers.

Optional filter refinements never fail a request: a value that cannot be
parsed is logged and the filter is omitted.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime
from typing import TypeVar
from urllib.parse import unquote_plus

from operations.exceptions import InvalidFilterError
from operations.models.transaction_request import TransactionRequestState
from operations.models.transfer import TransferStatus
from operations.utils.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=enum.Enum)

ENCODED_PLUS = "%2B"


class ExportFilter(enum.StrEnum):
    """Body keys accepted by the transaction request export."""

    transaction_id = "TRANSACTIONID"
    payer_id = "PAYERID"
    payee_id = "PAYEEID"
    workflow_instance_key = "WORKFLOWINSTANCEKEY"
    state = "STATE"
    error_description = "ERRORDESCRIPTION"
    external_id = "EXTERNALID"


def parse_enum(enum_cls: type[E], raw: str | None) -> E | None:
    """Return the member whose value is ``raw``, or ``None``."""
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning("failed to parse %s %r, ignoring it", enum_cls.__name__, raw)
        return None


def parse_status(raw: str | None) -> TransferStatus | None:
    return parse_enum(TransferStatus, raw)


def parse_state(raw: str | None) -> TransactionRequestState | None:
    return parse_enum(TransactionRequestState, raw)


def parse_states(raws: list[str]) -> list[TransactionRequestState]:
    """Parse each state, dropping the ones that are not recognised."""
    return [state for state in map(parse_state, raws) if state is not None]


def parse_export_filter(raw: str) -> ExportFilter:
    """Resolve an export body key, case-insensitively.

    Raises:
        InvalidFilterError: ``raw`` names no known filter.
    """
    try:
        return ExportFilter(raw.upper())
    except ValueError:
        raise InvalidFilterError(raw, [f.value for f in ExportFilter]) from None


def parse_datetime(raw: str, date_format: str) -> datetime:
    """Parse ``raw`` with ``date_format``, accepting its date-only prefix as midnight.

    Raises:
        ValueError: ``raw`` matches neither form.
    """
    try:
        parsed = datetime.strptime(raw, date_format)
    except ValueError:
        date_part = date_format.split(" ", 1)[0]
        if date_part == date_format:
            raise
        parsed = datetime.strptime(raw, date_part)
    return parsed.replace(tzinfo=UTC)


def decode_identifier(value: str | None) -> str | None:
    """Undo a second round of URL encoding on identifiers carrying ``+``.

    Query strings escape ``+`` as ``%2B``; clients that encode twice leave the
    escape in the decoded value, which then never matches the stored id.
    """
    if value is None or ENCODED_PLUS not in value.upper():
        return value
    try:
        decoded = unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        logger.warning("failed to decode identifier %r, using it as given", value)
        return value
    logger.info("Decoded identifier %r -> %r", value, decoded)
    return decoded
