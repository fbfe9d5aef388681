"""Transaction request API endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from operations.config import get_settings
from operations.dependencies import AppSettings, ExportSvc, TransactionRequestRepo
from operations.exceptions import EmptyExportError, WriteToCsvError
from operations.filters.transaction_request import ExportSharedFilter, TransactionRequestFilter
from operations.schemas.common import SORT_ORDER_PATTERN, ErrorResponse, PageRequest, SortDirection
from operations.schemas.transaction_request import (
    TransactionRequestListResponse,
    TransactionRequestResponse,
)
from operations.services.csv_writer import write_to_csv
from operations.utils.audit import audit_logged
from operations.utils.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)

router = APIRouter()

EXPORT_FILENAME = "transaction_requests.csv"


def transaction_request_filter(
    payer_party_id: str | None = Query(None, alias="payerPartyId"),
    payee_party_id: str | None = Query(None, alias="payeePartyId"),
    payee_dfsp_id: str | None = Query(None, alias="payeeDfspId"),
    payer_dfsp_id: str | None = Query(None, alias="payerDfspId"),
    transaction_id: str | None = Query(None, alias="transactionId"),
    state: str | None = None,
    amount: Decimal | None = None,
    currency: str | None = None,
    direction: str | None = None,
    start_from: str | None = Query(None, alias="startFrom"),
    start_to: str | None = Query(None, alias="startTo"),
) -> TransactionRequestFilter:
    return TransactionRequestFilter(
        payer_party_id=payer_party_id,
        payee_party_id=payee_party_id,
        payee_dfsp_id=payee_dfsp_id,
        payer_dfsp_id=payer_dfsp_id,
        transaction_id=transaction_id,
        state=state,
        amount=amount,
        currency=currency,
        direction=direction,
        start_from=start_from,
        start_to=start_to,
    )


def export_shared_filter(
    state: str | None = None,
    start_from: str | None = Query(None, alias="startFrom"),
    start_to: str | None = Query(None, alias="startTo"),
) -> ExportSharedFilter:
    return ExportSharedFilter(state=state, start_from=start_from, start_to=start_to)


@router.get("", response_model=TransactionRequestListResponse)
async def list_transaction_requests(
    repo: TransactionRequestRepo,
    config: AppSettings,
    filters: TransactionRequestFilter = Depends(transaction_request_filter),
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sorted_by: str | None = Query(None, alias="sortedBy"),
    sorted_order: str = Query("DESC", alias="sortedOrder", pattern=SORT_ORDER_PATTERN),
) -> TransactionRequestListResponse:
    """List transaction requests with optional filtering, sorting and pagination."""
    page_request = PageRequest(
        page=page,
        size=size,
        sort_field=sorted_by,
        sort_direction=SortDirection(sorted_order.upper()),
    )
    result = await repo.find_all(filters.to_predicate(config.date_format), page_request)
    return TransactionRequestListResponse.paginate(
        content=[TransactionRequestResponse.model_validate(t) for t in result.content],
        total=result.total,
        page=result.number,
        size=result.size,
    )


@router.post(
    "/export",
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"content": {"text/csv": {}}},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
    dependencies=[Depends(audit_logged("export_transaction_requests"))],
)
async def export_transaction_requests(
    service: ExportSvc,
    config: AppSettings,
    body: dict[str, list[str]] = Body(...),
    shared: ExportSharedFilter = Depends(export_shared_filter),
    page: int = Query(0, ge=0),
    size: int = Query(settings.export_page_size, ge=1, le=settings.export_max_page_size),
    sorted_order: str = Query("DESC", alias="sortedOrder", pattern=SORT_ORDER_PATTERN),
) -> Response:
    """Export transaction requests matching any of the id lists in the body as CSV.

    Body keys name the field to match (``transactionId``, ``payerId``,
    ``payeeId``, ``workflowInstanceKey``, ``state``, ``errorDescription``,
    ``externalId``; case-insensitive); ``state``/``startFrom``/``startTo``
    query params narrow every lookup.
    """
    page_request = PageRequest(
        page=page, size=size, sort_direction=SortDirection(sorted_order.upper())
    )
    result = await service.export(body, shared.to_predicate(config.date_format), page_request)

    if not result.records:
        raise EmptyExportError()

    try:
        payload = write_to_csv(result.records, TransactionRequestResponse)
    except WriteToCsvError as exc:
        return JSONResponse(content=exc.to_dict())

    logger.info("Exported %d transaction requests", len(result.records))
    return Response(
        content=payload,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
