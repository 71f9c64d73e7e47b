"""カートアイテム一覧取得ユースケース."""
from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartId
from cart_store.domain.ports import CartItemRepository, CartRepository

from .get_cart import CartNotFoundError


class ListCartItemsUseCase:
    """カートに属する全アイテムを取得するユースケース."""

    def __init__(
        self,
        cart_repository: CartRepository,
        cart_item_repository: CartItemRepository,
    ) -> None:
        """初期化."""
        self._cart_repository = cart_repository
        self._cart_item_repository = cart_item_repository

    def execute(self, cart_id: str) -> list[CartItem]:
        """カートのアイテムを取得する.

        Raises:
            InvalidIdError: カートIDの形式が不正な場合
            CartNotFoundError: カートが存在しない場合
        """
        cid = CartId(cart_id)
        if self._cart_repository.find_by_id(cid) is None:
            raise CartNotFoundError(cid)
        return self._cart_item_repository.find_by_cart_id(cid)
