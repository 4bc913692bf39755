"""Core cryptographic logic (pure Python, no file or terminal I/O)."""

from .cipher import open_, seal
from .container import parse, serialize
from .kdf import derive_key
from .pipeline import Pipeline, decrypt, encrypt
from .random_source import generate_nonce, generate_salt, random_bytes
from .secret import SecretBuffer

__all__ = [
    "open_",
    "seal",
    "parse",
    "serialize",
    "derive_key",
    "Pipeline",
    "encrypt",
    "decrypt",
    "generate_nonce",
    "generate_salt",
    "random_bytes",
    "SecretBuffer",
]
