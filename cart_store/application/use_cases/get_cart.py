"""カート取得ユースケース."""
from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import CartId
from cart_store.domain.ports import CartRepository


class CartNotFoundError(Exception):
    """カートが見つからないエラー."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__(f"A cart with ID={cart_id} not found.")


class GetCartUseCase:
    """カート取得ユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: str) -> Cart:
        """カートを取得する.

        Args:
            cart_id: カートID（UUID形式の文字列）

        Returns:
            カート

        Raises:
            InvalidIdError: カートIDの形式が不正な場合
            CartNotFoundError: カートが存在しない場合
        """
        cid = CartId(cart_id)
        cart = self._cart_repository.find_by_id(cid)
        if cart is None:
            raise CartNotFoundError(cid)
        return cart
