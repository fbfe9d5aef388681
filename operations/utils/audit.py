"""Audit logging for bulk data extraction."""

from fastapi import Request

from operations.utils.logging import get_logger

logger = get_logger("audit")


def audit_logged(action: str):
    """Dependency factory that logs who pulled data out of the service.

    Usage::

        @router.post("/export", dependencies=[Depends(audit_logged("export_transaction_requests"))])
    """

    async def _log(request: Request) -> None:
        try:
            client_ip = request.client.host if request.client else "unknown"
            request_id = getattr(request.state, "request_id", "n/a")
            logger.info(
                "AUDIT action=%s ip=%s request_id=%s path=%s query=%s",
                action,
                client_ip,
                request_id,
                request.url.path,
                request.url.query,
            )
        except Exception:
            logger.warning("Failed to write audit log for action=%s", action, exc_info=True)

    return _log
