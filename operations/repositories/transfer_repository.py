"""Repository for transfer data access."""

from operations.models.transfer import Transfer
from operations.repositories.base import RecordRepository


class TransferRepository(RecordRepository[Transfer]):
    """Read-only data access layer for transfers."""

    model = Transfer
