"""インフラストラクチャ層モジュール."""
from .repositories import (
    DynamoDBCartItemRepository,
    DynamoDBCartRepository,
    InMemoryCartItemRepository,
    InMemoryCartRepository,
)

__all__ = [
    "DynamoDBCartItemRepository",
    "DynamoDBCartRepository",
    "InMemoryCartItemRepository",
    "InMemoryCartRepository",
]
