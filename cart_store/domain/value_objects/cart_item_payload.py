"""カートアイテム入力値の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CartItemPayload:
    """カートアイテムの作成・更新時に受け付ける入力値.

    欠損したフィールドは None のまま保持し、妥当性の判定は
    CartItemPayloadValidator に委ねる。
    """

    name: Any = None
    price: Any = None
    quantity: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartItemPayload:
        """リクエストボディ等の辞書から生成する（未知のキーは無視する）."""
        quantity = data.get("quantity")
        # 100.0 のような整数値の float は int として扱う
        if isinstance(quantity, float) and quantity.is_integer():
            quantity = int(quantity)
        return cls(
            name=data.get("name"),
            price=data.get("price"),
            quantity=quantity,
        )
