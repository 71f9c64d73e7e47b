"""リポジトリ実装モジュール."""
from .dynamodb_cart_item_repository import DynamoDBCartItemRepository
from .dynamodb_cart_repository import DynamoDBCartRepository
from .in_memory_cart_item_repository import InMemoryCartItemRepository
from .in_memory_cart_repository import InMemoryCartRepository

__all__ = [
    "DynamoDBCartItemRepository",
    "DynamoDBCartRepository",
    "InMemoryCartItemRepository",
    "InMemoryCartRepository",
]
