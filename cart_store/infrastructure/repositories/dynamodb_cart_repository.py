"""カートリポジトリのDynamoDB実装."""
import logging
import os
from datetime import datetime
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import CartId, CartItemId, Principal
from cart_store.domain.ports import CartRepository, StorageError

logger = logging.getLogger(__name__)


class DynamoDBCartRepository(CartRepository):
    """カートリポジトリのDynamoDB実装."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get("CART_TABLE_NAME", "carts")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        item = self._to_dynamodb_item(cart)
        try:
            self._table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to save cart {cart.cart_id}: {e}")
            raise StorageError(f"Failed to save cart {cart.cart_id}") from e

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        try:
            response = self._table.get_item(Key={"cart_id": cart_id.value})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get cart {cart_id}: {e}")
            raise StorageError(f"Failed to get cart {cart_id}") from e
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_all(self) -> list[Cart]:
        """全カートを取得する（ページを全て辿る）."""
        try:
            response = self._table.scan()
            items = response.get("Items", [])
            while response.get("LastEvaluatedKey"):
                response = self._table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
                items.extend(response.get("Items", []))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to scan carts: {e}")
            raise StorageError("Failed to retrieve carts") from e
        return [self._from_dynamodb_item(item) for item in items]

    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        try:
            self._table.delete_item(Key={"cart_id": cart_id.value})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to delete cart {cart_id}: {e}")
            raise StorageError(f"Failed to delete cart {cart_id}") from e

    @staticmethod
    def _to_dynamodb_item(cart: Cart) -> dict[str, Any]:
        """CartエンティティをDynamoDBアイテムに変換."""
        item: dict[str, Any] = {
            "cart_id": cart.cart_id.value,
            "owner": cart.owner.value,
            "item_ids": [item_id.value for item_id in cart.get_item_ids()],
            # DynamoDB は float を受け付けないため Decimal で保存する
            "total_price": Decimal(str(cart.total_price)),
            "created_at": cart.created_at.isoformat(),
        }
        if cart.updated_at is not None:
            item["updated_at"] = cart.updated_at.isoformat()
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict[str, Any]) -> Cart:
        """DynamoDBアイテムをCartエンティティに変換."""
        updated_at = item.get("updated_at")
        return Cart(
            cart_id=CartId(item["cart_id"]),
            owner=Principal(item["owner"]),
            _item_ids=[CartItemId(item_id) for item_id in item.get("item_ids", [])],
            total_price=float(item.get("total_price", 0)),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )
