"""UUID形式の識別子バリデーション."""
import re

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class InvalidIdError(ValueError):
    """識別子の形式が不正なエラー."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"id='{value}' is not in the valid uuid format.")


def ensure_uuid_format(value: str) -> None:
    """UUIDの正規表現（8-4-4-4-12の16進数）に一致しない場合は例外を送出する.

    Raises:
        InvalidIdError: 形式が一致しない場合
    """
    if not isinstance(value, str) or UUID_PATTERN.fullmatch(value) is None:
        raise InvalidIdError(value)
