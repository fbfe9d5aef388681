"""Transfer model."""

import enum

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from operations.models.base import Base, IDMixin, PaymentMixin


class TransferStatus(enum.StrEnum):
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"
    failed = "FAILED"
    exception = "EXCEPTION"


class Transfer(IDMixin, PaymentMixin, Base):
    """Funds movement recorded by the settlement engine."""

    __tablename__ = "transfers"

    status: Mapped[str | None] = mapped_column(String(20))
    status_detail: Mapped[str | None] = mapped_column(String(255))
    error_information: Mapped[str | None] = mapped_column(String(2048))
    batch_id: Mapped[str | None] = mapped_column(String(64))

    __table_args__ = (Index("idx_transfer_status_started", "status", "started_at"),)
