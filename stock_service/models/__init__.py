from .stock import Stock

# This ensures all models are registered with SQLAlchemy
__all__ = [
    'Stock',
]
