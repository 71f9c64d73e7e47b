"""ドメインサービスモジュール."""
from .cart_item_payload_validator import MAX_QUANTITY, CartItemPayloadValidator
from .cart_total_calculator import CartTotalCalculator, CartTotalOverflowError

__all__ = [
    "MAX_QUANTITY",
    "CartItemPayloadValidator",
    "CartTotalCalculator",
    "CartTotalOverflowError",
]
