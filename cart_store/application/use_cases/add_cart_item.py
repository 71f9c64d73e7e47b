"""カートアイテム追加ユースケース."""
from datetime import datetime, timezone

from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartId, Principal
from cart_store.domain.ports import CartItemRepository, CartRepository
from cart_store.domain.services import (
    CartItemPayloadValidator,
    CartTotalCalculator,
    CartTotalOverflowError,
)
from cart_store.domain.value_objects import CartItemPayload

from .delete_cart import CartAccessDeniedError
from .get_cart import CartNotFoundError


class InvalidCartItemPayloadError(Exception):
    """カートアイテムの入力値が不正なエラー."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid payload. Errors={errors}")


class AddCartItemUseCase:
    """カートにアイテムを追加するユースケース."""

    def __init__(
        self,
        cart_repository: CartRepository,
        cart_item_repository: CartItemRepository,
    ) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
            cart_item_repository: カートアイテムリポジトリ
        """
        self._cart_repository = cart_repository
        self._cart_item_repository = cart_item_repository

    def execute(
        self,
        payload: CartItemPayload,
        cart_id: str,
        caller: Principal,
        now: datetime | None = None,
    ) -> CartItem:
        """アイテムを追加し、カートの合計金額を再計算する.

        Args:
            payload: アイテムの入力値
            cart_id: 追加先のカートID（UUID形式の文字列）
            caller: 呼び出し元
            now: 追加日時（省略時は現在時刻）

        Returns:
            追加したアイテム

        Raises:
            InvalidIdError: カートIDの形式が不正な場合
            InvalidCartItemPayloadError: 入力値が不正な場合（保存後の合計金額が範囲外の場合を含む）
            CartNotFoundError: カートが存在しない場合
            CartAccessDeniedError: 呼び出し元が所有者でない場合
        """
        cid = CartId(cart_id)

        errors = CartItemPayloadValidator.validate(payload)
        if errors:
            raise InvalidCartItemPayloadError(errors)

        cart = self._cart_repository.find_by_id(cid)
        if cart is None:
            raise CartNotFoundError(cid)
        if not cart.is_owned_by(caller):
            raise CartAccessDeniedError(cid)

        now = now or datetime.now(timezone.utc)
        item = CartItem.create(cart_id=cid, payload=payload, now=now)

        # 書き込み前に保存後の合計金額を確定させる
        try:
            total_price = CartTotalCalculator.compute_for_cart(
                cid, self._cart_item_repository, candidate=item
            )
        except CartTotalOverflowError as e:
            raise InvalidCartItemPayloadError([str(e)]) from e

        self._cart_item_repository.save(item)
        cart.attach_item(item.item_id, now)
        cart.apply_total_price(total_price, now)
        self._cart_repository.save(cart)

        return item
