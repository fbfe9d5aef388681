"""Pydantic schemas for transaction requests."""

from datetime import datetime
from decimal import Decimal

from operations.schemas.common import CamelModel, PaginatedResponse


class TransactionRequestResponse(CamelModel):
    """Response schema for a transaction request; also the export column set."""

    id: int
    workflow_instance_key: str | None
    transaction_id: str | None
    external_id: str | None
    client_correlation_id: str | None
    state: str | None
    started_at: datetime | None
    completed_at: datetime | None
    payer_party_id: str | None
    payer_party_id_type: str | None
    payer_dfsp_id: str | None
    payee_party_id: str | None
    payee_party_id_type: str | None
    payee_dfsp_id: str | None
    amount: Decimal | None
    currency: str | None
    direction: str | None
    initiator_type: str | None
    scenario: str | None
    error_description: str | None

    model_config = {"from_attributes": True}


class TransactionRequestListResponse(PaginatedResponse):
    """Paginated list of transaction requests."""

    content: list[TransactionRequestResponse]
