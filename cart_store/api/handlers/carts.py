"""カートAPI ハンドラー."""
import logging
from typing import Any

from cart_store.api.auth import AuthenticationError, require_caller_principal
from cart_store.api.dependencies import Dependencies
from cart_store.api.request import get_path_parameter
from cart_store.api.response import (
    bad_request_response,
    forbidden_response,
    internal_error_response,
    invalid_id_response,
    not_found_response,
    success_response,
    unauthorized_response,
)
from cart_store.application.use_cases import (
    CartAccessDeniedError,
    CartNotFoundError,
    CreateCartUseCase,
    DeleteCartUseCase,
    GetCartUseCase,
    ListCartsUseCase,
)
from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import InvalidIdError
from cart_store.domain.ports import StorageError

logger = logging.getLogger(__name__)


def _cart_to_dict(cart: Cart) -> dict[str, Any]:
    return {
        "cart_id": str(cart.cart_id),
        "owner": str(cart.owner),
        "item_ids": [str(item_id) for item_id in cart.get_item_ids()],
        "total_price": cart.total_price,
        "created_at": cart.created_at.isoformat(),
        "updated_at": cart.updated_at.isoformat() if cart.updated_at else None,
    }


def list_carts(event: dict, context: Any) -> dict:
    """全カートを取得する.

    GET /carts

    Returns:
        カート一覧
    """
    use_case = ListCartsUseCase(Dependencies.get_cart_repository())

    try:
        carts = use_case.execute()
    except StorageError:
        logger.exception("Failed to retrieve carts")
        return internal_error_response(
            "Failed to retrieve carts", error_code="STORAGE_ERROR", event=event
        )

    return success_response({"carts": [_cart_to_dict(cart) for cart in carts]}, event=event)


def get_cart(event: dict, context: Any) -> dict:
    """カートを取得する.

    GET /carts/{cart_id}

    Path Parameters:
        cart_id: カートID

    Returns:
        カート情報
    """
    cart_id = get_path_parameter(event, "cart_id")
    if not cart_id:
        return bad_request_response("cart_id is required", event=event)

    use_case = GetCartUseCase(Dependencies.get_cart_repository())

    try:
        cart = use_case.execute(cart_id)
    except InvalidIdError as e:
        return invalid_id_response(str(e), event=event)
    except CartNotFoundError:
        return not_found_response("Cart", event=event)
    except StorageError:
        logger.exception(f"Failed to get cart {cart_id}")
        return internal_error_response(
            "Failed to get cart", error_code="STORAGE_ERROR", event=event
        )

    return success_response(_cart_to_dict(cart), event=event)


def create_cart(event: dict, context: Any) -> dict:
    """呼び出し元を所有者とするカートを作成する.

    POST /carts

    Returns:
        作成したカート
    """
    try:
        caller = require_caller_principal(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    use_case = CreateCartUseCase(Dependencies.get_cart_repository())

    try:
        cart = use_case.execute(caller)
    except StorageError:
        logger.exception("Failed to create a new cart")
        return internal_error_response(
            "Failed to create a new cart", error_code="STORAGE_ERROR", event=event
        )

    return success_response(_cart_to_dict(cart), status_code=201, event=event)


def delete_cart(event: dict, context: Any) -> dict:
    """カートと、そのカートの全アイテムを削除する.

    DELETE /carts/{cart_id}

    Path Parameters:
        cart_id: カートID

    Returns:
        削除前のカート情報
    """
    try:
        caller = require_caller_principal(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    cart_id = get_path_parameter(event, "cart_id")
    if not cart_id:
        return bad_request_response("cart_id is required", event=event)

    use_case = DeleteCartUseCase(
        Dependencies.get_cart_repository(),
        Dependencies.get_cart_item_repository(),
    )

    try:
        cart = use_case.execute(cart_id, caller)
    except InvalidIdError as e:
        return invalid_id_response(str(e), event=event)
    except CartNotFoundError:
        return not_found_response("Cart", event=event)
    except CartAccessDeniedError as e:
        return forbidden_response(str(e), event=event)
    except StorageError:
        # アイテムの一部だけが削除された状態で残りうる（カートは残るので再実行可能）
        logger.exception(f"Failed to delete cart {cart_id}")
        return internal_error_response(
            "Failed to delete cart", error_code="STORAGE_ERROR", event=event
        )

    return success_response(_cart_to_dict(cart), event=event)
