"""依存性注入コンテナ."""
import os

from cart_store.domain.ports import CartItemRepository, CartRepository
from cart_store.infrastructure import InMemoryCartItemRepository, InMemoryCartRepository


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # CART_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CART_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    CART_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_repository: CartRepository | None = None
    _cart_item_repository: CartItemRepository | None = None

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """カートリポジトリを取得する."""
        if cls._cart_repository is None:
            if _use_dynamodb():
                from cart_store.infrastructure import DynamoDBCartRepository

                cls._cart_repository = DynamoDBCartRepository()
            else:
                cls._cart_repository = InMemoryCartRepository()
        return cls._cart_repository

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """カートリポジトリを設定する（テスト用）."""
        cls._cart_repository = repository

    @classmethod
    def get_cart_item_repository(cls) -> CartItemRepository:
        """カートアイテムリポジトリを取得する."""
        if cls._cart_item_repository is None:
            if _use_dynamodb():
                from cart_store.infrastructure import DynamoDBCartItemRepository

                cls._cart_item_repository = DynamoDBCartItemRepository()
            else:
                cls._cart_item_repository = InMemoryCartItemRepository()
        return cls._cart_item_repository

    @classmethod
    def set_cart_item_repository(cls, repository: CartItemRepository) -> None:
        """カートアイテムリポジトリを設定する（テスト用）."""
        cls._cart_item_repository = repository

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_repository = None
        cls._cart_item_repository = None
