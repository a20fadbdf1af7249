class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class StockServiceError(BaseServiceError):
    """Base exception for stock manager errors."""
    pass

class StockNotFoundError(StockServiceError):
    """Raised when no stock record has the requested id."""
    pass

class StockInternalError(StockServiceError):
    """Raised when the record store fails or an invariant is violated."""
    pass

class RecordStoreError(BaseServiceError):
    """Base exception for record store failures."""
    pass

class RecordNotFoundError(RecordStoreError):
    """Raised when a lookup by id finds nothing."""
    pass

class DuplicateIdError(RecordStoreError):
    """Raised when inserting a record whose id already exists."""
    pass

class EmptyStoreError(RecordStoreError):
    """Raised when asking an empty store for its last record."""
    pass

class StoreLoadError(RecordStoreError):
    """Raised when the store cannot be opened or initialized."""
    pass

class StartupError(BaseServiceError):
    """Raised when the process cannot start serving."""
    pass
