"""Repository for transaction request data access."""

from operations.models.transaction_request import TransactionRequest
from operations.repositories.base import RecordRepository


class TransactionRequestRepository(RecordRepository[TransactionRequest]):
    """Read-only data access layer for transaction requests."""

    model = TransactionRequest
