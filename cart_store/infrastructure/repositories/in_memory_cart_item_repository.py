"""カートアイテムリポジトリのインメモリ実装."""
import copy

from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartItemId
from cart_store.domain.ports import CartItemRepository


class InMemoryCartItemRepository(CartItemRepository):
    """カートアイテムリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._items: dict[str, CartItem] = {}

    def save(self, item: CartItem) -> None:
        """カートアイテムを保存する."""
        self._items[item.item_id.value] = copy.deepcopy(item)

    def find_by_id(self, item_id: CartItemId) -> CartItem | None:
        """カートアイテムIDで検索する."""
        stored = self._items.get(item_id.value)
        return copy.deepcopy(stored) if stored is not None else None

    def find_all(self) -> list[CartItem]:
        """全カートアイテムを取得する."""
        return [copy.deepcopy(item) for item in self._items.values()]

    def delete(self, item_id: CartItemId) -> None:
        """カートアイテムを削除する."""
        self._items.pop(item_id.value, None)
