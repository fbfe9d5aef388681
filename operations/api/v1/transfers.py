"""Transfer API endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from operations.config import get_settings
from operations.dependencies import AppSettings, TransferRepo
from operations.filters.transfer import TransferFilter
from operations.schemas.common import SORT_ORDER_PATTERN, PageRequest, SortDirection
from operations.schemas.transfer import TransferListResponse, TransferResponse

settings = get_settings()

router = APIRouter()


def transfer_filter(
    payer_party_id: str | None = Query(None, alias="payerPartyId"),
    payer_dfsp_id: str | None = Query(None, alias="payerDfspId"),
    payee_party_id: str | None = Query(None, alias="payeePartyId"),
    payee_dfsp_id: str | None = Query(None, alias="payeeDfspId"),
    transaction_id: str | None = Query(None, alias="transactionId"),
    status: str | None = None,
    amount: Decimal | None = None,
    currency: str | None = None,
    direction: str | None = None,
    party_id: str | None = Query(None, alias="partyId"),
    party_id_type: str | None = Query(None, alias="partyIdType"),
    start_from: str | None = Query(None, alias="startFrom"),
    start_to: str | None = Query(None, alias="startTo"),
) -> TransferFilter:
    return TransferFilter(
        payer_party_id=payer_party_id,
        payer_dfsp_id=payer_dfsp_id,
        payee_party_id=payee_party_id,
        payee_dfsp_id=payee_dfsp_id,
        transaction_id=transaction_id,
        status=status,
        amount=amount,
        currency=currency,
        direction=direction,
        party_id=party_id,
        party_id_type=party_id_type,
        start_from=start_from,
        start_to=start_to,
    )


@router.get("", response_model=TransferListResponse)
async def list_transfers(
    repo: TransferRepo,
    config: AppSettings,
    filters: TransferFilter = Depends(transfer_filter),
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sorted_by: str | None = Query(None, alias="sortedBy"),
    sorted_order: str = Query("DESC", alias="sortedOrder", pattern=SORT_ORDER_PATTERN),
) -> TransferListResponse:
    """List transfers with optional filtering, sorting and pagination."""
    page_request = PageRequest(
        page=page,
        size=size,
        sort_field=sorted_by,
        sort_direction=SortDirection(sorted_order.upper()),
    )
    result = await repo.find_all(filters.to_predicate(config.date_format), page_request)
    return TransferListResponse.paginate(
        content=[TransferResponse.model_validate(t) for t in result.content],
        total=result.total,
        page=result.number,
        size=result.size,
    )
