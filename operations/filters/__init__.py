"""Filter parsing and predicate composition for query parameters."""

from .parsing import ExportFilter
from .predicates import And, AnyOf, Equals, In, Predicate, Range
from .transaction_request import ExportSharedFilter, TransactionRequestFilter
from .transfer import TransferFilter

__all__ = [
    "And",
    "AnyOf",
    "Equals",
    "ExportFilter",
    "ExportSharedFilter",
    "In",
    "Predicate",
    "Range",
    "TransactionRequestFilter",
    "TransferFilter",
]
