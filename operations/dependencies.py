"""Engine/session factories and FastAPI dependency providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from operations.config import Settings, get_settings
from operations.repositories.transaction_request_repository import TransactionRequestRepository
from operations.repositories.transfer_repository import TransferRepository
from operations.services.export_service import ExportService


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the operations store."""
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped read-only session.

    Nothing is ever committed; the open transaction is rolled back when the
    request finishes, whether or not the handler raised.
    """
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_transfer_repo(db: DBSession) -> TransferRepository:
    return TransferRepository(db)


def get_transaction_request_repo(db: DBSession) -> TransactionRequestRepository:
    return TransactionRequestRepository(db)


TransferRepo = Annotated[TransferRepository, Depends(get_transfer_repo)]
TransactionRequestRepo = Annotated[
    TransactionRequestRepository, Depends(get_transaction_request_repo)
]


def get_export_service(repo: TransactionRequestRepo) -> ExportService:
    return ExportService(repo)


ExportSvc = Annotated[ExportService, Depends(get_export_service)]
