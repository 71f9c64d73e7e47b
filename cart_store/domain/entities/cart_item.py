"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import CartId, CartItemId
from ..value_objects import CartItemPayload


@dataclass
class CartItem:
    """カートに含まれる明細（名前・単価・数量）."""

    item_id: CartItemId
    cart_id: CartId
    name: str
    price: float
    quantity: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls, cart_id: CartId, payload: CartItemPayload, now: datetime | None = None
    ) -> CartItem:
        """検証済みの入力値から新しいアイテムを作成する."""
        return cls(
            item_id=CartItemId.generate(),
            cart_id=cart_id,
            name=payload.name,
            price=float(payload.price),
            quantity=int(payload.quantity),
            created_at=now or datetime.now(timezone.utc),
            updated_at=None,
        )

    def apply(self, payload: CartItemPayload, now: datetime) -> None:
        """名前・単価・数量を置き換える（ID・カートID・作成日時は維持）."""
        self.name = payload.name
        self.price = float(payload.price)
        self.quantity = int(payload.quantity)
        self.updated_at = now

    def get_subtotal(self) -> float:
        """小計（単価 × 数量）を計算する."""
        return self.price * self.quantity

    def belongs_to(self, cart_id: CartId) -> bool:
        """指定カートに属するか判定する."""
        return self.cart_id == cart_id
