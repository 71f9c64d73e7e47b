"""Lambdaハンドラーモジュール."""
from .cart_items import add_cart_item, list_cart_items, update_cart_item
from .carts import create_cart, delete_cart, get_cart, list_carts

__all__ = [
    # Carts
    "list_carts",
    "get_cart",
    "create_cart",
    "delete_cart",
    # Cart Items
    "add_cart_item",
    "update_cart_item",
    "list_cart_items",
]
