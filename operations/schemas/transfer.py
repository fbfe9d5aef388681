"""Pydantic schemas for transfers."""

from datetime import datetime
from decimal import Decimal

from operations.schemas.common import CamelModel, PaginatedResponse


class TransferResponse(CamelModel):
    """Response schema for a transfer."""

    id: int
    workflow_instance_key: str | None
    transaction_id: str | None
    started_at: datetime | None
    completed_at: datetime | None
    status: str | None
    status_detail: str | None
    payer_party_id: str | None
    payer_party_id_type: str | None
    payer_dfsp_id: str | None
    payee_party_id: str | None
    payee_party_id_type: str | None
    payee_dfsp_id: str | None
    amount: Decimal | None
    currency: str | None
    direction: str | None
    error_information: str | None
    batch_id: str | None

    model_config = {"from_attributes": True}


class TransferListResponse(PaginatedResponse):
    """Paginated list of transfers."""

    content: list[TransferResponse]
