"""カートアイテムリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import CartItem
from ..identifiers import CartId, CartItemId


class CartItemRepository(ABC):
    """カートアイテムリポジトリのインターフェース.

    セカンダリインデックスは持たず、カート単位の検索は全件走査で行う。
    """

    @abstractmethod
    def save(self, item: CartItem) -> None:
        """カートアイテムを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, item_id: CartItemId) -> CartItem | None:
        """カートアイテムIDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[CartItem]:
        """全カートアイテムを取得する."""
        pass

    @abstractmethod
    def delete(self, item_id: CartItemId) -> None:
        """カートアイテムを削除する."""
        pass

    def find_by_cart_id(self, cart_id: CartId) -> list[CartItem]:
        """カートIDで検索する（全件走査してフィルタ）."""
        return [item for item in self.find_all() if item.belongs_to(cart_id)]
