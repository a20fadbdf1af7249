# stock_service/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from stock_service import __version__
from stock_service.core.config import Settings, get_settings
from stock_service.routes import health, stock
from stock_service.services.stock_manager import StockManager
from stock_service.store import RecordStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application serving the stock procedures"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # StoreLoadError propagates: uvicorn treats a failed lifespan startup as fatal
        store = await RecordStore.load_or_init(settings.DATABASE_URL)
        app.state.stock_manager = StockManager(store)
        logger.info("Stock manager ready")
        try:
            yield  # This is where the app runs
        finally:
            await store.close()
            logger.info("Record store closed")

    app = FastAPI(
        title="Stock Service",
        description="Create, look up, update and stream stock records",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(stock.router)
    app.include_router(health.router)  # Health check should be accessible without auth

    return app


app = create_app()
