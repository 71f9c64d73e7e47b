"""呼び出し元識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """操作を行う呼び出し元のID（認証基盤の sub 等、外部参照用）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("Principal cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
