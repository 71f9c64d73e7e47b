"""Principalのテスト."""
import pytest

from cart_store.domain.identifiers import Principal


class TestPrincipal:
    """Principalの単体テスト."""

    def test_値を指定して生成できる(self) -> None:
        assert Principal("user-1").value == "user-1"

    def test_空文字列で生成するとエラー(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            Principal("")

    def test_値で比較される(self) -> None:
        """別インスタンスでも値が同じなら等価であることを確認."""
        assert Principal("user-1") == Principal("user-1")
        assert Principal("user-1") != Principal("user-2")
