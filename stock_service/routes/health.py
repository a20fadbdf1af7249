from fastapi import APIRouter, Depends

from stock_service.dependencies import get_stock_manager
from stock_service.services.stock_manager import StockManager

router = APIRouter(tags=["health"])

@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "stock-service"}

@router.get("/health/store")
async def store_health(manager: StockManager = Depends(get_stock_manager)):
    """Check that the record store answers"""
    try:
        count = await manager.count()
    except Exception as e:
        return {
            "status": "unhealthy",
            "store": "error",
            "error": str(e)
        }
    return {
        "status": "healthy",
        "store": "connected",
        "stocks_count": count
    }
