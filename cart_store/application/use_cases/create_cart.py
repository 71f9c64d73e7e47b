"""カート作成ユースケース."""
from datetime import datetime

from cart_store.domain.entities import Cart
from cart_store.domain.identifiers import Principal
from cart_store.domain.ports import CartRepository


class CreateCartUseCase:
    """呼び出し元を所有者とする空のカートを作成するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化."""
        self._cart_repository = cart_repository

    def execute(self, caller: Principal, now: datetime | None = None) -> Cart:
        """カートを作成する.

        Args:
            caller: 呼び出し元（カートの所有者になる）
            now: 作成日時（省略時は現在時刻）

        Returns:
            作成したカート
        """
        cart = Cart.create(owner=caller, now=now)
        self._cart_repository.save(cart)
        return cart
