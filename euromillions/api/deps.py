"""Dependency injection for FastAPI."""

from collections.abc import AsyncGenerator

from fastapi import HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from euromillions.data.store import DataStore
from euromillions.db.engine import async_session_factory
from euromillions.errors import (
    DrawingError,
    EuroMillionsError,
    InputValidationError,
    MaxAttemptsExceededError,
    ServiceNotReadyError,
)
from euromillions.services.drawing_service import DrawingService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for request scope."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_drawing_service(request: Request) -> DrawingService:
    return request.app.state.drawing_service


def http_error(error: EuroMillionsError) -> HTTPException:
    """Map a domain error to its HTTP status."""
    if isinstance(error, ServiceNotReadyError):
        status = 503
    elif isinstance(error, MaxAttemptsExceededError):
        status = 422
    elif isinstance(error, (InputValidationError, DrawingError)):
        status = 400
    else:
        status = 500
    return HTTPException(status_code=status, detail=error.description)
