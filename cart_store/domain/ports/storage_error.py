"""永続化層のエラー."""


class StorageError(Exception):
    """永続化ストアへの読み書きに失敗したエラー（リトライはしない）."""

    pass
