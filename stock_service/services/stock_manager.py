"""
Purpose: The single owner of the stock record store.

Role: Allocates stock ids and implements the four stock operations (create,
get by id, update by id, list all) on top of the RecordStore.

Every operation runs inside one critical section guarded by an asyncio.Lock,
so no two operations interleave on the store. Results are StockRead
snapshots, never live ORM records.

Id allocation scans the whole store and hands out max(id) + 1 (1 for an empty
store). Allocation, insert and the returned value all come from the same
critical section; the created record is returned as built, not re-read.
"""

import asyncio
import logging
from typing import List

from stock_service.core.exceptions import (
    RecordNotFoundError,
    RecordStoreError,
    StockInternalError,
    StockNotFoundError,
)
from stock_service.core.utils import UINT32_MAX, model_to_schema
from stock_service.models.stock import Stock, utc_now
from stock_service.schemas.stock import StockRead
from stock_service.store import RecordStore

logger = logging.getLogger(__name__)


class StockManager:
    def __init__(self, store: RecordStore):
        self.store = store
        self._lock = asyncio.Lock()

    async def _next_id(self) -> int:
        # Caller must hold self._lock
        latest_id = 0
        try:
            stocks = await self.store.iterate()
        except RecordStoreError as e:
            logger.error(f"Failed to scan stocks for the next id: {str(e)}")
            raise StockInternalError(f"Failed to allocate stock id: {str(e)}") from e
        for stock in stocks:
            if stock.id > latest_id:
                latest_id = stock.id
        if latest_id >= UINT32_MAX:
            raise StockInternalError("Stock id space exhausted")
        return latest_id + 1

    async def next_id(self) -> int:
        """Id the next created stock would receive."""
        async with self._lock:
            return await self._next_id()

    async def create_new(self, name: str, description: str, created_by: int) -> StockRead:
        """
        Creates a stock with the next free id.

        Args:
            name: Stock name, stored as given
            description: Stock description, stored as given
            created_by: Id of the creating actor

        Returns:
            The created stock

        Raises:
            StockInternalError: If the store cannot be read or rejects the write
        """
        async with self._lock:
            new_stock_id = await self._next_id()
            new_stock = Stock(
                id=new_stock_id,
                name=name,
                description=description,
                created_at=utc_now(),
                created_by=created_by,
            )
            try:
                await self.store.insert(new_stock)
            except RecordStoreError as e:
                logger.error(f"Failed to insert stock {new_stock_id}: {str(e)}")
                raise StockInternalError(f"Failed to create stock: {str(e)}") from e

            created = await model_to_schema(new_stock, StockRead)

        logger.info(f"Created stock {created.id} '{created.name}' (created_by={created.created_by})")
        return created

    async def get_by_id(self, stock_id: int) -> StockRead:
        """
        Raises:
            StockNotFoundError: If no stock has this id
            StockInternalError: If the store cannot be read
        """
        async with self._lock:
            try:
                return await self.store.find_by_id(stock_id)
            except RecordNotFoundError as e:
                raise StockNotFoundError(f"Stock with ID {stock_id} not found") from e
            except RecordStoreError as e:
                logger.error(f"Failed to read stock {stock_id}: {str(e)}")
                raise StockInternalError(f"Failed to read stock: {str(e)}") from e

    async def update_by_id(self, stock_id: int, name: str, description: str) -> StockRead:
        """
        Replaces name and description of an existing stock.

        Both fields are always overwritten; there is no partial update.
        id, created_at and created_by are left untouched.

        Raises:
            StockNotFoundError: If no stock has this id
            StockInternalError: If reading or saving the stock fails
        """
        async with self._lock:
            try:
                async with self.store.find_by_id_mut(stock_id) as stock:
                    stock.update(name, description)
                    updated = await model_to_schema(stock, StockRead)
            except RecordNotFoundError as e:
                raise StockNotFoundError(f"Stock with ID {stock_id} not found") from e
            except RecordStoreError as e:
                logger.error(f"Failed to update stock {stock_id}: {str(e)}")
                raise StockInternalError(f"Failed to update stock: {str(e)}") from e

        logger.debug(f"Updated stock {stock_id}")
        return updated

    async def list_all(self) -> List[StockRead]:
        """
        Every stock in insertion order.

        Raises:
            StockInternalError: If the store cannot be read
        """
        async with self._lock:
            try:
                return await self.store.iterate()
            except RecordStoreError as e:
                logger.error(f"Failed to list stocks: {str(e)}")
                raise StockInternalError(f"Failed to list stocks: {str(e)}") from e

    async def count(self) -> int:
        async with self._lock:
            try:
                return await self.store.count()
            except RecordStoreError as e:
                raise StockInternalError(f"Failed to count stocks: {str(e)}") from e
