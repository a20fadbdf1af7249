"""
Schema exports for the service.
"""

# Base schemas
from .base import BaseSchema

# Stock schemas
from .stock import StockRead, CreateNewRequest, GetByIdRequest, StockObject
