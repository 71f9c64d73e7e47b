"""ユースケースモジュール."""
from .add_cart_item import AddCartItemUseCase, InvalidCartItemPayloadError
from .create_cart import CreateCartUseCase
from .delete_cart import CartAccessDeniedError, DeleteCartUseCase
from .get_cart import CartNotFoundError, GetCartUseCase
from .list_cart_items import ListCartItemsUseCase
from .list_carts import ListCartsUseCase
from .update_cart_item import CartItemNotFoundError, UpdateCartItemUseCase

__all__ = [
    # Cart Use Cases
    "ListCartsUseCase",
    "GetCartUseCase",
    "CreateCartUseCase",
    "DeleteCartUseCase",
    # Cart Item Use Cases
    "AddCartItemUseCase",
    "UpdateCartItemUseCase",
    "ListCartItemsUseCase",
    # Errors
    "CartAccessDeniedError",
    "CartItemNotFoundError",
    "CartNotFoundError",
    "InvalidCartItemPayloadError",
]
