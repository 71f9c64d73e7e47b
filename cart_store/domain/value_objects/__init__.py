"""値オブジェクトモジュール."""
from .cart_item_payload import CartItemPayload

__all__ = [
    "CartItemPayload",
]
