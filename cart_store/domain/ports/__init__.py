"""ポートモジュール."""
from .cart_item_repository import CartItemRepository
from .cart_repository import CartRepository
from .storage_error import StorageError

__all__ = [
    "CartItemRepository",
    "CartRepository",
    "StorageError",
]
