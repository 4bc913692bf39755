"""Common constants and data types."""

from .constants import CryptoSettings, DEFAULT_SETTINGS, DEFAULT_SUFFIX
from .types import Container

__all__ = [
    "CryptoSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_SUFFIX",
    "Container",
]
