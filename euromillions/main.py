"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from euromillions.config import settings
from euromillions.data.store import DataStore
from euromillions.db.engine import engine, init_models
from euromillions.errors import ParserError
from euromillions.services.drawing_service import DrawingService

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add(settings.LOG_DIR / "app.log", rotation="10 MB", retention="7 days", level="INFO")


def load_store() -> DataStore:
    """Data store from DATA_FILE, empty when the file is missing or unusable."""
    if settings.DATA_FILE is None:
        logger.warning("DATA_FILE not set, history strategies run in degraded mode")
        return DataStore()
    if not settings.DATA_FILE.exists():
        logger.warning("History file {} not found", settings.DATA_FILE)
        return DataStore()

    try:
        return DataStore.from_file(settings.DATA_FILE)
    except ParserError as e:
        logger.error("Failed to load {}: {}", settings.DATA_FILE, e.description)
        return DataStore()
    except OSError as e:
        logger.error("Failed to read {}: {}", settings.DATA_FILE, e)
        return DataStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)

    await init_models()

    store = load_store()
    app.state.store = store
    app.state.drawing_service = DrawingService(store)

    yield

    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description="EuroMillions statistics and draw generator",
    lifespan=lifespan,
)

from euromillions.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
