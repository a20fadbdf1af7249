"""
Core module exports.
"""
from .exceptions import (
    BaseServiceError,
    StockServiceError,
    StockNotFoundError,
    StockInternalError,
    RecordStoreError,
    RecordNotFoundError,
    DuplicateIdError,
    EmptyStoreError,
    StoreLoadError,
    StartupError
)

from .utils import (
    UINT32_MAX,
    model_to_schema,
    models_to_schemas,
    parse_bind_address
)
