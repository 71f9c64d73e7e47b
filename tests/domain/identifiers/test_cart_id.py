"""CartIdのテスト."""
import pytest

from cart_store.domain.identifiers import CartId, InvalidIdError


class TestCartId:
    """CartIdの単体テスト."""

    def test_UUID形式の値を指定して生成できる(self) -> None:
        """UUID形式の文字列値を指定してCartIdを生成できることを確認."""
        cart_id = CartId("1b4e28ba-2fa1-11d2-883f-0016d3cca427")
        assert cart_id.value == "1b4e28ba-2fa1-11d2-883f-0016d3cca427"

    def test_大文字の16進数も受け付ける(self) -> None:
        """UUIDの大文字表記も有効な形式として扱うことを確認."""
        cart_id = CartId("1B4E28BA-2FA1-11D2-883F-0016D3CCA427")
        assert str(cart_id) == "1B4E28BA-2FA1-11D2-883F-0016D3CCA427"

    def test_空文字列で生成するとエラー(self) -> None:
        """空文字列を指定するとInvalidIdErrorが発生することを確認."""
        with pytest.raises(InvalidIdError):
            CartId("")

    def test_UUID形式でない値で生成するとエラー(self) -> None:
        """UUID形式でない値はすべてInvalidIdErrorになることを確認."""
        invalid_values = [
            "cart-001",
            "1b4e28ba2fa111d2883f0016d3cca427",
            "1b4e28ba-2fa1-11d2-883f-0016d3cca42",
            "1b4e28ba-2fa1-11d2-883f-0016d3cca4277",
            "zb4e28ba-2fa1-11d2-883f-0016d3cca427",
            " 1b4e28ba-2fa1-11d2-883f-0016d3cca427",
            "1b4e28ba-2fa1-11d2-883f-0016d3cca427\n",
        ]
        for value in invalid_values:
            with pytest.raises(InvalidIdError):
                CartId(value)

    def test_InvalidIdErrorはValueErrorのサブクラス(self) -> None:
        """既存のValueError処理でも捕捉できることを確認."""
        with pytest.raises(ValueError, match="not in the valid uuid format"):
            CartId("not-a-uuid")

    def test_generateで新しいIDを生成できる(self) -> None:
        """generateメソッドでUUID形式のIDが生成されることを確認."""
        cart_id = CartId.generate()
        assert len(cart_id.value) == 36  # UUID形式

    def test_generateは毎回異なるIDを生成する(self) -> None:
        """generateメソッドは呼び出しごとに異なるIDを生成することを確認."""
        assert CartId.generate() != CartId.generate()

    def test_同じ値のCartIdは等価(self) -> None:
        """同じvalue値を持つCartIdは等しいと判定されることを確認."""
        id1 = CartId("1b4e28ba-2fa1-11d2-883f-0016d3cca427")
        id2 = CartId("1b4e28ba-2fa1-11d2-883f-0016d3cca427")
        assert id1 == id2

    def test_不変オブジェクトである(self) -> None:
        """CartIdは不変（frozen）であることを確認."""
        cart_id = CartId.generate()
        with pytest.raises(AttributeError):
            cart_id.value = "changed"  # type: ignore
