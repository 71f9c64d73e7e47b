"""カートアイテム更新ユースケース."""
from datetime import datetime, timezone

from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartItemId, Principal
from cart_store.domain.ports import CartItemRepository, CartRepository
from cart_store.domain.services import (
    CartItemPayloadValidator,
    CartTotalCalculator,
    CartTotalOverflowError,
)
from cart_store.domain.value_objects import CartItemPayload

from .add_cart_item import InvalidCartItemPayloadError
from .delete_cart import CartAccessDeniedError
from .get_cart import CartNotFoundError


class CartItemNotFoundError(Exception):
    """カートアイテムが見つからないエラー."""

    def __init__(self, item_id: CartItemId) -> None:
        self.item_id = item_id
        super().__init__(f"Cart item with ID={item_id} not found.")


class UpdateCartItemUseCase:
    """カートアイテムを更新するユースケース."""

    def __init__(
        self,
        cart_repository: CartRepository,
        cart_item_repository: CartItemRepository,
    ) -> None:
        """初期化."""
        self._cart_repository = cart_repository
        self._cart_item_repository = cart_item_repository

    def execute(
        self,
        payload: CartItemPayload,
        item_id: str,
        caller: Principal,
        now: datetime | None = None,
    ) -> CartItem:
        """アイテムの名前・単価・数量を置き換え、カートの合計金額を再計算する.

        Args:
            payload: 新しい入力値
            item_id: カートアイテムID（UUID形式の文字列）
            caller: 呼び出し元
            now: 更新日時（省略時は現在時刻）

        Returns:
            更新後のアイテム

        Raises:
            InvalidIdError: アイテムIDの形式が不正な場合
            InvalidCartItemPayloadError: 入力値が不正な場合（保存後の合計金額が範囲外の場合を含む）
            CartItemNotFoundError: アイテムが存在しない場合
            CartNotFoundError: アイテムの属するカートが存在しない場合
            CartAccessDeniedError: 呼び出し元が所有者でない場合
        """
        iid = CartItemId(item_id)

        errors = CartItemPayloadValidator.validate(payload)
        if errors:
            raise InvalidCartItemPayloadError(errors)

        item = self._cart_item_repository.find_by_id(iid)
        if item is None:
            raise CartItemNotFoundError(iid)

        cart = self._cart_repository.find_by_id(item.cart_id)
        if cart is None:
            raise CartNotFoundError(item.cart_id)
        if not cart.is_owned_by(caller):
            raise CartAccessDeniedError(cart.cart_id)

        now = now or datetime.now(timezone.utc)
        item.apply(payload, now)

        try:
            total_price = CartTotalCalculator.compute_for_cart(
                cart.cart_id, self._cart_item_repository, candidate=item
            )
        except CartTotalOverflowError as e:
            raise InvalidCartItemPayloadError([str(e)]) from e

        self._cart_item_repository.save(item)
        cart.apply_total_price(total_price, now)
        self._cart_repository.save(cart)

        return item
