"""カートアイテムリポジトリのDynamoDB実装."""
import logging
import os
from datetime import datetime
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartId, CartItemId
from cart_store.domain.ports import CartItemRepository, StorageError

logger = logging.getLogger(__name__)


class DynamoDBCartItemRepository(CartItemRepository):
    """カートアイテムリポジトリのDynamoDB実装."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get("CART_ITEM_TABLE_NAME", "cart_items")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, item: CartItem) -> None:
        """カートアイテムを保存する."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(item))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to save cart item {item.item_id}: {e}")
            raise StorageError(f"Failed to save cart item {item.item_id}") from e

    def find_by_id(self, item_id: CartItemId) -> CartItem | None:
        """カートアイテムIDで検索する."""
        try:
            response = self._table.get_item(Key={"item_id": item_id.value})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get cart item {item_id}: {e}")
            raise StorageError(f"Failed to get cart item {item_id}") from e
        record = response.get("Item")
        if record is None:
            return None
        return self._from_dynamodb_item(record)

    def find_all(self) -> list[CartItem]:
        """全カートアイテムを取得する（ページを全て辿る）."""
        try:
            response = self._table.scan()
            records = response.get("Items", [])
            while response.get("LastEvaluatedKey"):
                response = self._table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
                records.extend(response.get("Items", []))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to scan cart items: {e}")
            raise StorageError("Failed to retrieve cart items") from e
        return [self._from_dynamodb_item(record) for record in records]

    def delete(self, item_id: CartItemId) -> None:
        """カートアイテムを削除する."""
        try:
            self._table.delete_item(Key={"item_id": item_id.value})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to delete cart item {item_id}: {e}")
            raise StorageError(f"Failed to delete cart item {item_id}") from e

    @staticmethod
    def _to_dynamodb_item(item: CartItem) -> dict[str, Any]:
        """CartItemエンティティをDynamoDBアイテムに変換."""
        record: dict[str, Any] = {
            "item_id": item.item_id.value,
            "cart_id": item.cart_id.value,
            "name": item.name,
            "price": Decimal(str(item.price)),
            "quantity": item.quantity,
            "created_at": item.created_at.isoformat(),
        }
        if item.updated_at is not None:
            record["updated_at"] = item.updated_at.isoformat()
        return record

    @staticmethod
    def _from_dynamodb_item(record: dict[str, Any]) -> CartItem:
        """DynamoDBアイテムをCartItemエンティティに変換."""
        updated_at = record.get("updated_at")
        return CartItem(
            item_id=CartItemId(record["item_id"]),
            cart_id=CartId(record["cart_id"]),
            name=record["name"],
            # Decimal を float / int に戻す
            price=float(record["price"]),
            quantity=int(record["quantity"]),
            created_at=datetime.fromisoformat(record["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )
