"""
Schemas for stock records.

StockRead is the detached snapshot the stock manager hands out. The remaining
schemas are the wire messages of the four stock procedures.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from stock_service.core.utils import UINT32_MAX
from .base import BaseSchema

UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]


class StockRead(BaseSchema):
    """Snapshot of a stored stock record"""
    id: UInt32
    name: str
    description: str
    created_at: datetime
    created_by: UInt32


class CreateNewRequest(BaseSchema):
    name: str
    description: str
    created_by: UInt32


class GetByIdRequest(BaseSchema):
    stock_id: UInt32


class StockObject(BaseSchema):
    """
    Wire form of a stock record.

    Also the request body of UpdateById, where only stock_id, name and
    description are read; created_at and created_by may be omitted.
    """
    stock_id: UInt32
    name: str
    description: str
    created_at: Optional[datetime] = None
    created_by: UInt32 = 0

    @classmethod
    def from_stock(cls, stock: StockRead) -> "StockObject":
        return cls(
            stock_id=stock.id,
            name=stock.name,
            description=stock.description,
            created_at=stock.created_at,
            created_by=stock.created_by,
        )
