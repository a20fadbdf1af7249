from fastapi import Request

from stock_service.services.stock_manager import StockManager


def get_stock_manager(request: Request) -> StockManager:
    """Dependency for the process-wide stock manager created in the app lifespan."""
    return request.app.state.stock_manager
