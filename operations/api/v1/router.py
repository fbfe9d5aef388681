"""API v1 router."""

from fastapi import APIRouter

from operations.api.v1 import transaction_requests, transfers

api_router = APIRouter()

api_router.include_router(transfers.router, prefix="/transfers", tags=["Transfers"])
api_router.include_router(
    transaction_requests.router, prefix="/transactionRequests", tags=["Transaction Requests"]
)
