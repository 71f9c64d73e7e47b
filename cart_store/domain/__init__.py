"""ドメイン層モジュール."""
from .entities import Cart, CartItem
from .identifiers import CartId, CartItemId, InvalidIdError, Principal
from .ports import CartItemRepository, CartRepository, StorageError
from .services import CartItemPayloadValidator, CartTotalCalculator, CartTotalOverflowError
from .value_objects import CartItemPayload

__all__ = [
    # Identifiers
    "CartId",
    "CartItemId",
    "InvalidIdError",
    "Principal",
    # Entities
    "Cart",
    "CartItem",
    # Value Objects
    "CartItemPayload",
    # Ports
    "CartItemRepository",
    "CartRepository",
    "StorageError",
    # Services
    "CartItemPayloadValidator",
    "CartTotalCalculator",
    "CartTotalOverflowError",
]
