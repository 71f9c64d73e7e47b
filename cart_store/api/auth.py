"""認証ユーティリティ."""
from cart_store.domain.identifiers import Principal


def get_caller_principal(event: dict) -> Principal | None:
    """認証済みの呼び出し元を取得する.

    Cognito Authorizer が設定されたエンドポイントでは、
    event["requestContext"]["authorizer"]["claims"]["sub"] に呼び出し元のIDが含まれる。

    Args:
        event: Lambda イベント

    Returns:
        呼び出し元（未認証の場合はNone）
    """
    try:
        claims = event.get("requestContext", {}).get("authorizer", {}).get("claims", {})
        sub = claims.get("sub")
        if sub:
            return Principal(sub)
    except (AttributeError, TypeError):
        # event構造が想定外の場合（値がdictでない等）は未認証として扱う
        pass
    return None


def require_caller_principal(event: dict) -> Principal:
    """認証済みの呼び出し元を取得する（必須）.

    Raises:
        AuthenticationError: 未認証の場合
    """
    principal = get_caller_principal(event)
    if principal is None:
        raise AuthenticationError("Authentication required")
    return principal


class AuthenticationError(Exception):
    """認証エラー."""

    pass
