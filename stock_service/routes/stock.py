# stock_service/routes/stock.py
"""
Remote procedures of the stock service.

CreateNew, GetById and UpdateById map one request to one StockManager call.
GetAll resolves the full list from the manager first, so the manager lock is
released before anything is sent, then streams it as newline-delimited JSON,
one stock per line, in store order.
"""

import logging
from typing import AsyncIterator, List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from stock_service.core.exceptions import StockInternalError, StockNotFoundError
from stock_service.dependencies import get_stock_manager
from stock_service.schemas.stock import CreateNewRequest, GetByIdRequest, StockObject, StockRead
from stock_service.services.stock_manager import StockManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stock", tags=["stock"])

NDJSON_MEDIA_TYPE = "application/x-ndjson"


@router.post("/CreateNew", response_model=StockObject)
async def create_new(
    request: CreateNewRequest,
    manager: StockManager = Depends(get_stock_manager)
):
    try:
        stock = await manager.create_new(request.name, request.description, request.created_by)
    except StockInternalError as e:
        logger.error(f"CreateNew failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
    return StockObject.from_stock(stock)


@router.post("/GetById", response_model=StockObject)
async def get_by_id(
    request: GetByIdRequest,
    manager: StockManager = Depends(get_stock_manager)
):
    try:
        stock = await manager.get_by_id(request.stock_id)
    except StockNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="The requested stock was not found")
    except StockInternalError as e:
        logger.error(f"GetById failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
    return StockObject.from_stock(stock)


@router.post("/UpdateById", response_model=StockObject)
async def update_by_id(
    request: StockObject,
    manager: StockManager = Depends(get_stock_manager)
):
    try:
        stock = await manager.update_by_id(request.stock_id, request.name, request.description)
    except StockNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="The requested stock was not found")
    except StockInternalError as e:
        logger.error(f"UpdateById failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
    return StockObject.from_stock(stock)


async def stream_stocks(stocks: List[StockRead]) -> AsyncIterator[str]:
    """
    Yield one JSON line per stock.

    The transport pulls one line at a time, so a slow reader suspends this
    generator. If the reader goes away the generator is closed mid-stream:
    production stops and the abort is logged, nothing is raised further.
    """
    sent = 0
    try:
        for stock in stocks:
            yield StockObject.from_stock(stock).model_dump_json() + "\n"
            sent += 1
    finally:
        if sent < len(stocks):
            logger.info(f"GetAll stream aborted after {sent} of {len(stocks)} stocks")


@router.post("/GetAll", response_class=StreamingResponse)
async def get_all(manager: StockManager = Depends(get_stock_manager)):
    try:
        stocks = await manager.list_all()
    except StockInternalError as e:
        logger.error(f"GetAll failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
    logger.debug(f"Streaming {len(stocks)} stocks")
    return StreamingResponse(stream_stocks(stocks), media_type=NDJSON_MEDIA_TYPE)
