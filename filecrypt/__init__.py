"""Password-based file encryption with AES-256-GCM."""

from .core.pipeline import decrypt, encrypt
from .encryption import decrypt_file, encrypt_file
from .utils import (
    AuthenticationFailedError,
    EntropyUnavailableError,
    FileCryptError,
    InvalidParametersError,
    MalformedContainerError,
)

__version__ = "0.1.0"

__all__ = [
    "encrypt",
    "decrypt",
    "encrypt_file",
    "decrypt_file",
    "FileCryptError",
    "EntropyUnavailableError",
    "InvalidParametersError",
    "MalformedContainerError",
    "AuthenticationFailedError",
]
