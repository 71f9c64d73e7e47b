"""カートアイテムAPI ハンドラー."""
import logging
from typing import Any

from cart_store.api.auth import AuthenticationError, require_caller_principal
from cart_store.api.dependencies import Dependencies
from cart_store.api.request import get_body, get_path_parameter
from cart_store.api.response import (
    bad_request_response,
    forbidden_response,
    internal_error_response,
    invalid_id_response,
    not_found_response,
    success_response,
    unauthorized_response,
    validation_error_response,
)
from cart_store.application.use_cases import (
    AddCartItemUseCase,
    CartAccessDeniedError,
    CartItemNotFoundError,
    CartNotFoundError,
    InvalidCartItemPayloadError,
    ListCartItemsUseCase,
    UpdateCartItemUseCase,
)
from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import InvalidIdError
from cart_store.domain.ports import StorageError
from cart_store.domain.value_objects import CartItemPayload

logger = logging.getLogger(__name__)


def _cart_item_to_dict(item: CartItem) -> dict[str, Any]:
    return {
        "item_id": str(item.item_id),
        "cart_id": str(item.cart_id),
        "name": item.name,
        "price": item.price,
        "quantity": item.quantity,
        "created_at": item.created_at.isoformat(),
        "updated_at": item.updated_at.isoformat() if item.updated_at else None,
    }


def list_cart_items(event: dict, context: Any) -> dict:
    """カートのアイテム一覧を取得する.

    GET /carts/{cart_id}/items

    Path Parameters:
        cart_id: カートID

    Returns:
        アイテム一覧
    """
    cart_id = get_path_parameter(event, "cart_id")
    if not cart_id:
        return bad_request_response("cart_id is required", event=event)

    use_case = ListCartItemsUseCase(
        Dependencies.get_cart_repository(),
        Dependencies.get_cart_item_repository(),
    )

    try:
        items = use_case.execute(cart_id)
    except InvalidIdError as e:
        return invalid_id_response(str(e), event=event)
    except CartNotFoundError:
        return not_found_response("Cart", event=event)
    except StorageError:
        logger.exception(f"Failed to retrieve cart items for {cart_id}")
        return internal_error_response(
            "Failed to retrieve cart items", error_code="STORAGE_ERROR", event=event
        )

    return success_response(
        {"items": [_cart_item_to_dict(item) for item in items]}, event=event
    )


def add_cart_item(event: dict, context: Any) -> dict:
    """カートにアイテムを追加する.

    POST /carts/{cart_id}/items

    Path Parameters:
        cart_id: カートID

    Request Body:
        name: 名前
        price: 単価（正の数）
        quantity: 数量（正の整数）

    Returns:
        追加したアイテム
    """
    try:
        caller = require_caller_principal(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    cart_id = get_path_parameter(event, "cart_id")
    if not cart_id:
        return bad_request_response("cart_id is required", event=event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = AddCartItemUseCase(
        Dependencies.get_cart_repository(),
        Dependencies.get_cart_item_repository(),
    )

    try:
        item = use_case.execute(CartItemPayload.from_dict(body), cart_id, caller)
    except InvalidIdError as e:
        return invalid_id_response(str(e), event=event)
    except InvalidCartItemPayloadError as e:
        return validation_error_response(e.errors, event=event)
    except CartNotFoundError:
        return not_found_response("Cart", event=event)
    except CartAccessDeniedError as e:
        return forbidden_response(str(e), event=event)
    except StorageError:
        logger.exception(f"Failed to add cart item to {cart_id}")
        return internal_error_response(
            "Failed to add cart item", error_code="STORAGE_ERROR", event=event
        )

    return success_response(_cart_item_to_dict(item), status_code=201, event=event)


def update_cart_item(event: dict, context: Any) -> dict:
    """カートアイテムを更新する.

    PUT /cart-items/{item_id}

    Path Parameters:
        item_id: カートアイテムID

    Request Body:
        name: 名前
        price: 単価（正の数）
        quantity: 数量（正の整数）

    Returns:
        更新後のアイテム
    """
    try:
        caller = require_caller_principal(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    item_id = get_path_parameter(event, "item_id")
    if not item_id:
        return bad_request_response("item_id is required", event=event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = UpdateCartItemUseCase(
        Dependencies.get_cart_repository(),
        Dependencies.get_cart_item_repository(),
    )

    try:
        item = use_case.execute(CartItemPayload.from_dict(body), item_id, caller)
    except InvalidIdError as e:
        return invalid_id_response(str(e), event=event)
    except InvalidCartItemPayloadError as e:
        return validation_error_response(e.errors, event=event)
    except CartItemNotFoundError:
        return not_found_response("Cart item", event=event)
    except CartNotFoundError:
        return not_found_response("Cart", event=event)
    except CartAccessDeniedError as e:
        return forbidden_response(str(e), event=event)
    except StorageError:
        logger.exception(f"Failed to update cart item {item_id}")
        return internal_error_response(
            "Failed to update cart item", error_code="STORAGE_ERROR", event=event
        )

    return success_response(_cart_item_to_dict(item), event=event)
