"""識別子モジュール."""
from .cart_id import CartId
from .cart_item_id import CartItemId
from .principal import Principal
from .uuid_format import InvalidIdError

__all__ = [
    "CartId",
    "CartItemId",
    "InvalidIdError",
    "Principal",
]
