"""Unit tests for engine, session and repository providers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from operations.config import Settings
from operations.dependencies import (
    create_engine,
    get_db_session,
    get_export_service,
    get_transaction_request_repo,
    get_transfer_repo,
)
from operations.repositories.transaction_request_repository import TransactionRequestRepository
from operations.repositories.transfer_repository import TransferRepository
from operations.services.export_service import ExportService


def _request_with_session():
    """Return a fake request whose app.state.session_factory yields a mock session."""
    session = AsyncMock()

    class _SessionContext:
        async def __aenter__(self):
            return session

        async def __aexit__(self, *args):
            return False

    request = MagicMock()
    request.app.state.session_factory = MagicMock(return_value=_SessionContext())
    return request, session


async def _drain(gen):
    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()


@pytest.mark.asyncio
class TestGetDbSession:
    async def test_yields_session_and_never_commits(self):
        request, session = _request_with_session()

        gen = get_db_session(request)
        assert await gen.__anext__() is session
        await _drain(gen)

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    async def test_handler_error_rolls_back_and_propagates(self):
        request, session = _request_with_session()

        gen = get_db_session(request)
        await gen.__anext__()
        with pytest.raises(RuntimeError, match="query failed"):
            await gen.athrow(RuntimeError("query failed"))

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()


class TestProviders:
    def test_repositories_share_the_request_session(self):
        session = AsyncMock()

        transfers = get_transfer_repo(session)
        requests = get_transaction_request_repo(session)

        assert isinstance(transfers, TransferRepository)
        assert isinstance(requests, TransactionRequestRepository)
        assert transfers.session is session
        assert requests.session is session

    def test_export_service_wraps_transaction_request_repo(self):
        repo = TransactionRequestRepository(AsyncMock())
        service = get_export_service(repo)
        assert isinstance(service, ExportService)
        assert service.repo is repo

    def test_engine_uses_configured_url(self):
        settings = Settings(database_url="postgresql://ops:ops@db:5432/operations")
        engine = create_engine(settings)
        try:
            assert engine.url.drivername == "postgresql+asyncpg"
            assert engine.url.database == "operations"
        finally:
            engine.sync_engine.dispose()
