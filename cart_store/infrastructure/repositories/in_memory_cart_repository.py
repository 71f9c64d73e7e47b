"""カートリポジトリのインメモリ実装."""
import copy

from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import CartId
from cart_store.domain.ports import CartRepository


class InMemoryCartRepository(CartRepository):
    """カートリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        self._carts[cart.cart_id.value] = copy.deepcopy(cart)

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        stored = self._carts.get(cart_id.value)
        return copy.deepcopy(stored) if stored is not None else None

    def find_all(self) -> list[Cart]:
        """全カートを取得する."""
        return [copy.deepcopy(cart) for cart in self._carts.values()]

    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        self._carts.pop(cart_id.value, None)
