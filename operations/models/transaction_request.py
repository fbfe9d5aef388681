"""Transaction request model."""

import enum

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from operations.models.base import Base, IDMixin, PaymentMixin


class TransactionRequestState(enum.StrEnum):
    received = "RECEIVED"
    in_progress = "IN_PROGRESS"
    accepted = "ACCEPTED"
    rejected = "REJECTED"
    failed = "FAILED"
    success = "SUCCESS"


class TransactionRequest(IDMixin, PaymentMixin, Base):
    """Request to initiate a transfer, tracked until it settles or fails."""

    __tablename__ = "transaction_requests"

    state: Mapped[str | None] = mapped_column(String(20))
    external_id: Mapped[str | None] = mapped_column(String(128), index=True)
    client_correlation_id: Mapped[str | None] = mapped_column(String(128))
    initiator_type: Mapped[str | None] = mapped_column(String(32))
    scenario: Mapped[str | None] = mapped_column(String(32))
    error_description: Mapped[str | None] = mapped_column(String(2048))

    __table_args__ = (Index("idx_txn_request_state_started", "state", "started_at"),)
