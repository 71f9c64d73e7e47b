"""カートリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Cart
from ..identifiers import CartId


class CartRepository(ABC):
    """カートリポジトリのインターフェース.

    実装は永続化ストアの障害を StorageError として送出する。
    """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[Cart]:
        """全カートを取得する."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        pass
