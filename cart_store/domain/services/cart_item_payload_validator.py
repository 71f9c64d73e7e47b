"""カートアイテム入力値バリデーションドメインサービス."""
import math
from typing import Any

from ..value_objects import CartItemPayload

# 数量は 16 ビット符号なし整数の範囲に収める
MAX_QUANTITY = 65535


def _is_number(value: Any) -> bool:
    # bool は int のサブクラスなので除外する
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_finite_float(value: Any) -> float | None:
    """有限の float に変換できなければ None を返す."""
    if not _is_number(value):
        return None
    try:
        converted = float(value)
    except OverflowError:
        return None
    return converted if math.isfinite(converted) else None


class CartItemPayloadValidator:
    """カートアイテム入力値の妥当性を検証するサービス."""

    @staticmethod
    def validate(payload: CartItemPayload) -> list[str]:
        """違反しているルールごとにエラーメッセージを返す.

        例外は送出しない。検証順は名前・単価・数量・小計で固定。
        小計の検証は単価と数量がともに妥当な場合のみ行う。

        Args:
            payload: 入力値

        Returns:
            エラーメッセージのリスト（妥当な場合は空）
        """
        errors: list[str] = []

        name = payload.name
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Name must not be empty. Current name='{name}'.")

        price = payload.price
        price_value = _to_finite_float(price)
        if price_value is None and _is_number(price):
            errors.append(f"Price must be a finite number. Current price='{price}'.")
        elif price_value is None or price_value <= 0:
            errors.append(
                f"Price cannot be a negative value or zero. Current price='{price}'."
            )
            price_value = None

        quantity = payload.quantity
        quantity_valid = False
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            errors.append(f"Quantity needs to be positive. Current quantity='{quantity}'.")
        elif quantity > MAX_QUANTITY:
            errors.append(
                f"Quantity cannot exceed {MAX_QUANTITY}. Current quantity='{quantity}'."
            )
        else:
            quantity_valid = True

        if price_value is not None and quantity_valid:
            if not math.isfinite(price_value * quantity):
                errors.append(
                    f"Subtotal exceeds the supported range. "
                    f"Current price='{price}', quantity='{quantity}'."
                )

        return errors
