"""CartTotalCalculatorのテスト."""
import pytest

from cart_store.domain.entities import CartItem
from cart_store.domain.identifiers import CartId
from cart_store.domain.services import CartTotalCalculator, CartTotalOverflowError
from cart_store.domain.value_objects import CartItemPayload
from cart_store.infrastructure.repositories import InMemoryCartItemRepository

CART_ID = CartId("1b4e28ba-2fa1-11d2-883f-0016d3cca427")
OTHER_CART_ID = CartId("6fa459ea-ee8a-3ca4-894e-db77e160355e")


class TestCartTotalCalculator:
    """合計金額計算の単体テスト."""

    def test_アイテムがなければ0(self) -> None:
        assert CartTotalCalculator.calculate([]) == 0.0

    def test_単価と数量の積を合算する(self) -> None:
        items = [
            CartItem.create(CART_ID, CartItemPayload("Pen", 2.5, 3)),
            CartItem.create(CART_ID, CartItemPayload("Notebook", 4.25, 2)),
        ]
        assert CartTotalCalculator.calculate(items) == 16.0

    def test_compute_for_cartは対象カートのアイテムだけを合算する(self) -> None:
        repo = InMemoryCartItemRepository()
        repo.save(CartItem.create(CART_ID, CartItemPayload("Pen", 2.5, 3)))
        repo.save(CartItem.create(OTHER_CART_ID, CartItemPayload("Ink", 100.0, 1)))
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo) == 7.5

    def test_compute_for_cartは毎回ストアから計算し直す(self) -> None:
        repo = InMemoryCartItemRepository()
        item = CartItem.create(CART_ID, CartItemPayload("Pen", 2.5, 3))
        repo.save(item)
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo) == 7.5

        repo.delete(item.item_id)
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo) == 0.0

    def test_合計がオーバーフローする場合はエラー(self) -> None:
        items = [
            CartItem.create(CART_ID, CartItemPayload("Gold", 1e308, 1)),
            CartItem.create(CART_ID, CartItemPayload("Platinum", 1e308, 1)),
        ]
        with pytest.raises(CartTotalOverflowError) as exc_info:
            CartTotalCalculator.calculate(items)
        assert exc_info.value.item_count == 2

    def test_candidateは同じIDのアイテムを置き換えて合算する(self) -> None:
        repo = InMemoryCartItemRepository()
        item = CartItem.create(CART_ID, CartItemPayload("Pen", 2.5, 3))
        repo.save(item)

        item.apply(CartItemPayload("Pen", 2.5, 5), item.created_at)
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo, candidate=item) == 12.5
        # 保存前なのでストアの値は変わらない
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo) == 7.5

    def test_candidateが未保存なら追加して合算する(self) -> None:
        repo = InMemoryCartItemRepository()
        repo.save(CartItem.create(CART_ID, CartItemPayload("Pen", 2.5, 3)))
        new_item = CartItem.create(CART_ID, CartItemPayload("Notebook", 4.0, 1))
        assert CartTotalCalculator.compute_for_cart(CART_ID, repo, candidate=new_item) == 11.5
