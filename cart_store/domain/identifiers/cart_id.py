"""カート識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass

from .uuid_format import ensure_uuid_format


@dataclass(frozen=True)
class CartId:
    """カートの一意識別子（UUID形式）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        ensure_uuid_format(self.value)

    @classmethod
    def generate(cls) -> CartId:
        """新しいCartIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
