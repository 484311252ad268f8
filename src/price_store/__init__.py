from .app import create_app, main
from .errors import InternalError, NotFoundError, PriceStoreError, ValidationError
from .models import Price
from .store import PriceStore

__all__ = [
    "create_app",
    "main",
    "InternalError",
    "NotFoundError",
    "Price",
    "PriceStore",
    "PriceStoreError",
    "ValidationError",
]
