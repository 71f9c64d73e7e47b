"""カートAPIハンドラーのテスト."""
import json

import pytest

from cart_store.api.dependencies import Dependencies
from cart_store.api.handlers.carts import create_cart, delete_cart, get_cart, list_carts
from cart_store.domain.entities import Cart, CartItem
from cart_store.domain.identifiers import Principal
from cart_store.domain.ports import StorageError
from cart_store.domain.value_objects import CartItemPayload
from cart_store.infrastructure.repositories import (
    InMemoryCartItemRepository,
    InMemoryCartRepository,
)

MISSING_ID = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"


def _event(sub: str | None = "user-1", path: dict | None = None) -> dict:
    event: dict = {"pathParameters": path}
    if sub is not None:
        event["requestContext"] = {"authorizer": {"claims": {"sub": sub}}}
    return event


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセット."""
    Dependencies.reset()
    yield
    Dependencies.reset()


@pytest.fixture
def repos() -> tuple[InMemoryCartRepository, InMemoryCartItemRepository]:
    cart_repo = InMemoryCartRepository()
    item_repo = InMemoryCartItemRepository()
    Dependencies.set_cart_repository(cart_repo)
    Dependencies.set_cart_item_repository(item_repo)
    return cart_repo, item_repo


class TestCreateCart:
    """POST /carts のテスト."""

    def test_認証済みの呼び出し元でカートを作成できる(self, repos) -> None:
        response = create_cart(_event(), None)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["owner"] == "user-1"
        assert body["item_ids"] == []
        assert body["total_price"] == 0.0
        assert body["updated_at"] is None
        assert len(repos[0].find_all()) == 1

    def test_未認証の場合401(self, repos) -> None:
        response = create_cart(_event(sub=None), None)
        assert response["statusCode"] == 401
        assert repos[0].find_all() == []


class TestGetCart:
    """GET /carts/{cart_id} のテスト."""

    def test_カートを取得できる(self, repos) -> None:
        cart = Cart.create(owner=Principal("user-1"))
        repos[0].save(cart)

        response = get_cart(_event(path={"cart_id": cart.cart_id.value}), None)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["cart_id"] == cart.cart_id.value

    def test_存在しないカートは404(self, repos) -> None:
        response = get_cart(_event(path={"cart_id": MISSING_ID}), None)
        assert response["statusCode"] == 404

    def test_不正な形式のIDは400(self, repos) -> None:
        response = get_cart(_event(path={"cart_id": "cart-001"}), None)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["code"] == "INVALID_ID"

    def test_cart_idがなければ400(self, repos) -> None:
        response = get_cart(_event(), None)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["code"] == "BAD_REQUEST"


class TestListCarts:
    """GET /carts のテスト."""

    def test_全カートを返す(self, repos) -> None:
        repos[0].save(Cart.create(owner=Principal("user-1")))
        repos[0].save(Cart.create(owner=Principal("user-2")))

        response = list_carts(_event(), None)

        assert response["statusCode"] == 200
        assert len(json.loads(response["body"])["carts"]) == 2

    def test_ストア障害は500(self, repos, monkeypatch) -> None:
        def _raise():
            raise StorageError("Failed to retrieve carts")

        monkeypatch.setattr(repos[0], "find_all", _raise)
        response = list_carts(_event(), None)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"]["code"] == "STORAGE_ERROR"
        assert "Access-Control-Allow-Origin" in response["headers"]


class TestDeleteCart:
    """DELETE /carts/{cart_id} のテスト."""

    def test_所有者はカートとアイテムを削除できる(self, repos) -> None:
        cart_repo, item_repo = repos
        cart = Cart.create(owner=Principal("user-1"))
        cart_repo.save(cart)
        item = CartItem.create(cart.cart_id, CartItemPayload("Pen", 2.5, 3))
        item_repo.save(item)

        response = delete_cart(_event(path={"cart_id": cart.cart_id.value}), None)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["cart_id"] == cart.cart_id.value
        assert cart_repo.find_by_id(cart.cart_id) is None
        assert item_repo.find_by_id(item.item_id) is None

    def test_所有者以外は403(self, repos) -> None:
        cart = Cart.create(owner=Principal("user-1"))
        repos[0].save(cart)

        response = delete_cart(_event(sub="user-2", path={"cart_id": cart.cart_id.value}), None)

        assert response["statusCode"] == 403
        assert repos[0].find_by_id(cart.cart_id) is not None

    def test_未認証の場合401(self, repos) -> None:
        response = delete_cart(_event(sub=None, path={"cart_id": MISSING_ID}), None)
        assert response["statusCode"] == 401

    def test_存在しないカートは404(self, repos) -> None:
        response = delete_cart(_event(path={"cart_id": MISSING_ID}), None)
        assert response["statusCode"] == 404
