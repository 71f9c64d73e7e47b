"""API層モジュール."""
from .dependencies import Dependencies
from .handlers import (
    add_cart_item,
    create_cart,
    delete_cart,
    get_cart,
    list_cart_items,
    list_carts,
    update_cart_item,
)
from .request import get_body, get_path_parameter
from .response import (
    bad_request_response,
    error_response,
    forbidden_response,
    internal_error_response,
    invalid_id_response,
    not_found_response,
    success_response,
    unauthorized_response,
    validation_error_response,
)

__all__ = [
    # Dependencies
    "Dependencies",
    # Request utilities
    "get_body",
    "get_path_parameter",
    # Response utilities
    "success_response",
    "error_response",
    "bad_request_response",
    "forbidden_response",
    "internal_error_response",
    "invalid_id_response",
    "not_found_response",
    "unauthorized_response",
    "validation_error_response",
    # Handlers
    "list_carts",
    "get_cart",
    "create_cart",
    "delete_cart",
    "add_cart_item",
    "update_cart_item",
    "list_cart_items",
]
