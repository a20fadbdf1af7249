"""
Purpose: Durable, insertion-ordered collection of stock records keyed by id.

The store wraps a single AsyncSession. It does no locking of its own: the
StockManager that owns it serializes every call. Read operations hand out
StockRead snapshots; only find_by_id_mut exposes a live ORM record, and only
for the duration of its context block.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from stock_service.core.exceptions import (
    DuplicateIdError,
    EmptyStoreError,
    RecordNotFoundError,
    RecordStoreError,
    StoreLoadError,
)
from stock_service.core.utils import model_to_schema, models_to_schemas
from stock_service.database import Base, create_engine_for, create_session_factory
from stock_service.models.stock import Stock
from stock_service.schemas.stock import StockRead

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self, engine: AsyncEngine, session: AsyncSession):
        self.engine = engine
        self.session = session

    @classmethod
    async def load_or_init(cls, database_url: str) -> "RecordStore":
        """
        Open the store at database_url, creating its table if needed.

        Raises:
            StoreLoadError: If the database cannot be opened or initialized
        """
        engine = None
        try:
            engine = create_engine_for(database_url)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            if engine is not None:
                await engine.dispose()
            raise StoreLoadError(f"Failed to load record store: {str(e)}") from e

        session = create_session_factory(engine)()
        logger.info("Record store ready at %s", engine.url.render_as_string(hide_password=True))
        return cls(engine, session)

    async def close(self) -> None:
        await self.session.close()
        await self.engine.dispose()

    async def _execute(self, statement, action: str):
        try:
            return await self.session.execute(statement)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RecordStoreError(f"Failed to {action}: {str(e)}") from e

    async def _get(self, stock_id: int) -> Optional[Stock]:
        result = await self._execute(
            select(Stock).where(Stock.id == stock_id), f"read stock {stock_id}"
        )
        return result.scalar_one_or_none()

    async def iterate(self) -> List[StockRead]:
        """All records in insertion order."""
        result = await self._execute(select(Stock).order_by(Stock.seq), "read stocks")
        return await models_to_schemas(result.scalars().all(), StockRead)

    async def insert(self, record: Stock) -> None:
        """
        Append a record.

        Raises:
            DuplicateIdError: If a record with the same id exists
            RecordStoreError: If the write fails
        """
        if await self._get(record.id) is not None:
            raise DuplicateIdError(f"Stock with ID {record.id} already exists")

        self.session.add(record)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateIdError(f"Stock with ID {record.id} already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RecordStoreError(f"Failed to insert stock {record.id}: {str(e)}") from e

    async def find_by_id(self, stock_id: int) -> StockRead:
        """
        Raises:
            RecordNotFoundError: If no record has this id
            RecordStoreError: If the read fails
        """
        record = await self._get(stock_id)
        if record is None:
            raise RecordNotFoundError(f"Stock with ID {stock_id} not found")
        return await model_to_schema(record, StockRead)

    @asynccontextmanager
    async def find_by_id_mut(self, stock_id: int) -> AsyncIterator[Stock]:
        """
        Yield the live record for in-place changes.

        Changes are committed when the block exits normally and rolled back
        when it raises.

        Raises:
            RecordNotFoundError: If no record has this id
            RecordStoreError: If committing the changes fails
        """
        record = await self._get(stock_id)
        if record is None:
            raise RecordNotFoundError(f"Stock with ID {stock_id} not found")

        try:
            yield record
        except Exception:
            await self.session.rollback()
            raise

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RecordStoreError(f"Failed to save stock {stock_id}: {str(e)}") from e

    async def last(self) -> StockRead:
        """
        The most recently inserted record.

        Raises:
            EmptyStoreError: If the store holds no records
            RecordStoreError: If the read fails
        """
        result = await self._execute(
            select(Stock).order_by(Stock.seq.desc()).limit(1), "read last stock"
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise EmptyStoreError("Record store is empty")
        return await model_to_schema(record, StockRead)

    async def count(self) -> int:
        result = await self._execute(select(func.count()).select_from(Stock), "count stocks")
        return result.scalar_one()
