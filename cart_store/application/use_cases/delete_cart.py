"""カート削除ユースケース."""
import logging

from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import CartId, Principal
from cart_store.domain.ports import CartItemRepository, CartRepository

from .get_cart import CartNotFoundError

logger = logging.getLogger(__name__)


class CartAccessDeniedError(Exception):
    """呼び出し元がカートの所有者でないエラー."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__("Caller isn't the principal of the cart")


class DeleteCartUseCase:
    """カートと、そのカートに属する全アイテムを削除するユースケース."""

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

    def execute(self, cart_id: str, caller: Principal) -> Cart:
        """カートを削除する.

        アイテムを先に全て削除してからカートを削除する。途中でストア障害が
        起きた場合はカートが残るため、同じ呼び出しで再実行できる。

        Args:
            cart_id: カートID（UUID形式の文字列）
            caller: 呼び出し元

        Returns:
            削除前のカート

        Raises:
            InvalidIdError: カートIDの形式が不正な場合
            CartNotFoundError: カートが存在しない場合
            CartAccessDeniedError: 呼び出し元が所有者でない場合
        """
        cid = CartId(cart_id)
        cart = self._cart_repository.find_by_id(cid)
        if cart is None:
            raise CartNotFoundError(cid)
        if not cart.is_owned_by(caller):
            raise CartAccessDeniedError(cid)

        items = self._cart_item_repository.find_by_cart_id(cid)
        for item in items:
            self._cart_item_repository.delete(item.item_id)
        self._cart_repository.delete(cid)

        logger.info(f"Deleted cart {cid} with {len(items)} items")
        return cart
