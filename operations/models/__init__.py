"""Database models package."""

from operations.models.base import Base
from operations.models.transaction_request import TransactionRequest, TransactionRequestState
from operations.models.transfer import Transfer, TransferStatus

__all__ = [
    "Base",
    "Transfer",
    "TransactionRequest",
    "TransferStatus",
    "TransactionRequestState",
]
