"""CreateCartUseCaseのテスト."""
from datetime import datetime, timezone

from cart_store.application.use_cases import CreateCartUseCase
from cart_store.domain.identifiers import Principal
from cart_store.infrastructure.repositories import InMemoryCartRepository


class TestCreateCartUseCase:
    """カート作成ユースケースのテスト."""

    def test_呼び出し元を所有者とする空のカートを作成する(self):
        repo = InMemoryCartRepository()
        now = datetime(2026, 10, 1, tzinfo=timezone.utc)
        cart = CreateCartUseCase(repo).execute(Principal("user-1"), now=now)

        assert cart.owner == Principal("user-1")
        assert cart.total_price == 0.0
        assert cart.get_item_ids() == []
        assert cart.created_at == now
        assert cart.updated_at is None

    def test_作成したカートが保存される(self):
        repo = InMemoryCartRepository()
        cart = CreateCartUseCase(repo).execute(Principal("user-1"))
        assert repo.find_by_id(cart.cart_id) == cart

    def test_日時省略時は現在時刻で作成される(self):
        repo = InMemoryCartRepository()
        before = datetime.now(timezone.utc)
        cart = CreateCartUseCase(repo).execute(Principal("user-1"))
        assert cart.created_at >= before
