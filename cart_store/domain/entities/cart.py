"""カート集約ルート."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import CartId, CartItemId, Principal


@dataclass
class Cart:
    """呼び出し元が所有するカートアイテムの入れ物（集約ルート）.

    total_price はアイテムから導出される値であり、アイテムの追加・更新のたびに
    再計算した結果を apply_total_price で反映する。
    """

    cart_id: CartId
    owner: Principal
    _item_ids: list[CartItemId] = field(default_factory=list)
    total_price: float = 0.0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @classmethod
    def create(cls, owner: Principal, now: datetime | None = None) -> Cart:
        """新しいカートを作成する."""
        return cls(
            cart_id=CartId.generate(),
            owner=owner,
            _item_ids=[],
            total_price=0.0,
            created_at=now or datetime.now(timezone.utc),
            updated_at=None,
        )

    def is_owned_by(self, principal: Principal) -> bool:
        """指定の呼び出し元がこのカートの所有者か判定する."""
        return self.owner == principal

    def attach_item(self, item_id: CartItemId, now: datetime) -> None:
        """アイテムIDを末尾に追加する."""
        self._item_ids.append(item_id)
        self.updated_at = now

    def apply_total_price(self, total_price: float, now: datetime) -> None:
        """再計算した合計金額を反映する."""
        if not math.isfinite(total_price) or total_price < 0:
            raise ValueError(f"Total price must be a finite non-negative value: {total_price}")
        self.total_price = total_price
        self.updated_at = now

    def get_item_ids(self) -> list[CartItemId]:
        """アイテムIDのリストを取得（防御的コピー）."""
        return list(self._item_ids)
