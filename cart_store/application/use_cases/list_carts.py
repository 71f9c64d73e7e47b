"""カート一覧取得ユースケース."""
from cart_store.domain.entities import Cart
from cart_store.domain.ports import CartRepository


class ListCartsUseCase:
    """全カートを取得するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化."""
        self._cart_repository = cart_repository

    def execute(self) -> list[Cart]:
        """全カートを取得する（順序はストアの走査順）."""
        return self._cart_repository.find_all()
