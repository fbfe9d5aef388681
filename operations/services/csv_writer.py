"""CSV rendering of ORM records through their pydantic response schema."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from pydantic import BaseModel, ValidationError

from operations.exceptions import WriteToCsvError
from operations.utils.logging import get_logger

logger = get_logger(__name__)


def csv_columns(schema: type[BaseModel]) -> list[str]:
    """Header names: each field's serialisation alias, in declaration order."""
    return [info.alias or name for name, info in schema.model_fields.items()]


def write_to_csv(records: Iterable[object], schema: type[BaseModel]) -> bytes:
    """Render ``records`` as UTF-8 CSV with one column per ``schema`` field.

    Raises:
        WriteToCsvError: a record does not fit ``schema`` or cannot be encoded.
    """
    columns = csv_columns(schema)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns, extrasaction="ignore")
    try:
        writer.writeheader()
        for record in records:
            row = schema.model_validate(record).model_dump(mode="json", by_alias=True)
            writer.writerow({k: "" if v is None else v for k, v in row.items()})
        return buffer.getvalue().encode("utf-8")
    except (ValidationError, csv.Error, UnicodeEncodeError) as exc:
        logger.error("Failed to write %s rows to CSV: %s", schema.__name__, exc)
        raise WriteToCsvError(str(exc)) from exc
