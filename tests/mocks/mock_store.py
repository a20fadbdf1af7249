from contextlib import asynccontextmanager
from typing import List

from stock_service.core.exceptions import (
    DuplicateIdError,
    EmptyStoreError,
    RecordNotFoundError,
)
from stock_service.models.stock import Stock
from stock_service.schemas.stock import StockRead


class MockRecordStore:
    """In-memory stand-in for RecordStore"""

    def __init__(self):
        self.records: List[Stock] = []
        self.insert_calls: list = []  # Track calls for testing
        self.last_calls = 0
        self.closed = False

    def _snapshot(self, record: Stock) -> StockRead:
        return StockRead.model_validate(record, from_attributes=True)

    def _get(self, stock_id: int):
        for record in self.records:
            if record.id == stock_id:
                return record
        return None

    async def iterate(self) -> List[StockRead]:
        return [self._snapshot(record) for record in self.records]

    async def insert(self, record: Stock) -> None:
        self.insert_calls.append(record.id)
        if self._get(record.id) is not None:
            raise DuplicateIdError(f"Stock with ID {record.id} already exists")
        self.records.append(record)

    async def find_by_id(self, stock_id: int) -> StockRead:
        record = self._get(stock_id)
        if record is None:
            raise RecordNotFoundError(f"Stock with ID {stock_id} not found")
        return self._snapshot(record)

    @asynccontextmanager
    async def find_by_id_mut(self, stock_id: int):
        record = self._get(stock_id)
        if record is None:
            raise RecordNotFoundError(f"Stock with ID {stock_id} not found")
        yield record

    async def last(self) -> StockRead:
        self.last_calls += 1
        if not self.records:
            raise EmptyStoreError("Record store is empty")
        return self._snapshot(self.records[-1])

    async def count(self) -> int:
        return len(self.records)

    async def close(self) -> None:
        self.closed = True
