"""Declarative base and shared column mixins."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import BigInteger, DateTime, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class IDMixin:
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)


class PaymentMixin:
    """Columns shared by transfers and transaction requests."""

    workflow_instance_key: Mapped[str | None] = mapped_column(String(64), index=True)
    transaction_id: Mapped[str | None] = mapped_column(String(64), index=True)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    payer_party_id: Mapped[str | None] = mapped_column(String(128), index=True)
    payer_party_id_type: Mapped[str | None] = mapped_column(String(32))
    payer_dfsp_id: Mapped[str | None] = mapped_column(String(64))
    payee_party_id: Mapped[str | None] = mapped_column(String(128), index=True)
    payee_party_id_type: Mapped[str | None] = mapped_column(String(32))
    payee_dfsp_id: Mapped[str | None] = mapped_column(String(64))

    amount: Mapped[Decimal | None] = mapped_column(Numeric(19, 2))
    currency: Mapped[str | None] = mapped_column(String(3))
    direction: Mapped[str | None] = mapped_column(String(16))
