"""GetCartUseCase / ListCartsUseCaseのテスト."""
from unittest.mock import MagicMock

import pytest

from cart_store.application.use_cases import (
    CartNotFoundError,
    GetCartUseCase,
    ListCartsUseCase,
)
from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import InvalidIdError, Principal
from cart_store.domain.ports import CartRepository
from cart_store.infrastructure.repositories import InMemoryCartRepository


class TestGetCartUseCase:
    """カート取得ユースケースのテスト."""

    def test_IDでカートを取得できる(self):
        repo = InMemoryCartRepository()
        cart = Cart.create(owner=Principal("user-1"))
        repo.save(cart)

        result = GetCartUseCase(repo).execute(cart.cart_id.value)
        assert result.cart_id == cart.cart_id

    def test_存在しないカートでエラー(self):
        repo = InMemoryCartRepository()
        with pytest.raises(CartNotFoundError):
            GetCartUseCase(repo).execute("1b4e28ba-2fa1-11d2-883f-0016d3cca427")

    def test_不正な形式のIDでストアに触れずエラー(self):
        repo = MagicMock(spec=CartRepository)
        with pytest.raises(InvalidIdError):
            GetCartUseCase(repo).execute("cart-001")
        repo.find_by_id.assert_not_called()


class TestListCartsUseCase:
    """カート一覧取得ユースケースのテスト."""

    def test_カートがなければ空リスト(self):
        assert ListCartsUseCase(InMemoryCartRepository()).execute() == []

    def test_全カートを取得できる(self):
        repo = InMemoryCartRepository()
        repo.save(Cart.create(owner=Principal("user-1")))
        repo.save(Cart.create(owner=Principal("user-2")))
        assert len(ListCartsUseCase(repo).execute()) == 2
