"""Domain exceptions and the structured error payload they render to."""

import enum


class ErrorCode(enum.StrEnum):
    INVALID_FILTER = "INVALID_FILTER"
    INVALID_SORT_FIELD = "INVALID_SORT_FIELD"
    CSV_WRITE_FAILED = "CSV_WRITE_FAILED"


class OperationsError(Exception):
    """Base error carrying the ``errorCode/errorDescription/developerMessage`` triple."""

    def __init__(self, error_code: str, error_description: str, developer_message: str) -> None:
        super().__init__(error_description)
        self.error_code = error_code
        self.error_description = error_description
        self.developer_message = developer_message

    def to_dict(self) -> dict[str, str]:
        return {
            "errorCode": self.error_code,
            "errorDescription": self.error_description,
            "developerMessage": self.developer_message,
        }


class InvalidFilterError(OperationsError):
    """Raised for an export body key that names no known filter."""

    def __init__(self, filter_name: str, allowed: list[str]) -> None:
        super().__init__(
            ErrorCode.INVALID_FILTER,
            f"Invalid filter value {filter_name}",
            f"Possible filter values are {allowed}",
        )
        self.filter_name = filter_name


class UnknownSortFieldError(OperationsError):
    """Raised when ``sortedBy`` does not name a column of the queried table."""

    def __init__(self, sort_field: str, table: str) -> None:
        super().__init__(
            ErrorCode.INVALID_SORT_FIELD,
            f"Invalid sort field {sort_field}",
            f"Table {table} has no column matching {sort_field}",
        )
        self.sort_field = sort_field


class WriteToCsvError(OperationsError):
    """Raised when records cannot be rendered as CSV."""

    def __init__(self, developer_message: str) -> None:
        super().__init__(
            ErrorCode.CSV_WRITE_FAILED,
            "Failed to write export data to CSV",
            developer_message,
        )


class EmptyExportError(OperationsError):
    """Raised when an export resolved no records at all; answered with 404."""

    def __init__(self) -> None:
        super().__init__("404", "Empty response", "Empty response")
