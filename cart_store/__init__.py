"""ショッピングカート記録ストアのパッケージ."""
from . import domain

__all__ = ["domain"]
