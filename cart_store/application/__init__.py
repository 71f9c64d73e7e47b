"""アプリケーション層モジュール."""
from .use_cases import (
    AddCartItemUseCase,
    CartAccessDeniedError,
    CartItemNotFoundError,
    CartNotFoundError,
    CreateCartUseCase,
    DeleteCartUseCase,
    GetCartUseCase,
    InvalidCartItemPayloadError,
    ListCartItemsUseCase,
    ListCartsUseCase,
    UpdateCartItemUseCase,
)

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
