"""カート合計金額計算ドメインサービス."""
import math

from ..entities import CartItem
from ..identifiers import CartId
from ..ports import CartItemRepository


class CartTotalOverflowError(ValueError):
    """合計金額が表現可能な範囲を超えたエラー."""

    def __init__(self, item_count: int) -> None:
        self.item_count = item_count
        super().__init__(
            f"Total price exceeds the supported range. Current item count='{item_count}'."
        )


class CartTotalCalculator:
    """カートの合計金額（単価 × 数量の総和）を計算するサービス."""

    @staticmethod
    def calculate(items: list[CartItem]) -> float:
        """アイテムの小計を合算する（アイテムがなければ0）.

        Raises:
            CartTotalOverflowError: 合計が有限の float で表せない場合
        """
        try:
            total = math.fsum(item.get_subtotal() for item in items)
        except OverflowError as e:
            raise CartTotalOverflowError(len(items)) from e
        if not math.isfinite(total):
            raise CartTotalOverflowError(len(items))
        return total

    @staticmethod
    def compute_for_cart(
        cart_id: CartId,
        cart_item_repository: CartItemRepository,
        candidate: CartItem | None = None,
    ) -> float:
        """カートに属するアイテムを毎回走査し直して合計金額を計算する.

        candidate を渡すと、走査結果の同じIDのアイテムを置き換えた（なければ追加した）
        合計を返す。保存前に保存後の合計を確定させるために使う。
        """
        items = cart_item_repository.find_by_cart_id(cart_id)
        if candidate is not None:
            items = [item for item in items if item.item_id != candidate.item_id]
            items.append(candidate)
        return CartTotalCalculator.calculate(items)
