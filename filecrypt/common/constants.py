"""Constants used throughout the application."""

from dataclasses import dataclass
from typing import ClassVar

from ..utils import InvalidParametersError


# PBKDF2-HMAC-SHA256 work factor. Changing it makes existing files unreadable.
PBKDF2_ITERATIONS = 600_000

KEY_LENGTH = 32  # AES-256
SALT_LENGTH = 16
NONCE_LENGTH = 12  # 96-bit GCM nonce
TAG_LENGTH = 16

# Nonce sizes AESGCM accepts
MIN_NONCE_LENGTH = 8
MAX_NONCE_LENGTH = 128

# Default suffix appended to encrypted output files
DEFAULT_SUFFIX = ".enc"

# Suffix used when decrypting a file that does not carry DEFAULT_SUFFIX
DECRYPTED_SUFFIX = ".dec"


@dataclass(frozen=True)
class CryptoSettings:
    """
    Cryptographic parameters and the container offsets they imply.

    Key and tag sizes are fixed by AES-256-GCM. Salt and nonce sizes and
    the iteration count are carried here so that the codec, the KDF and the
    cipher all read the same values.
    """

    iterations: int = PBKDF2_ITERATIONS
    salt_length: int = SALT_LENGTH
    nonce_length: int = NONCE_LENGTH

    key_length: ClassVar[int] = KEY_LENGTH
    tag_length: ClassVar[int] = TAG_LENGTH

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise InvalidParametersError("Iteration count must be positive.")
        if self.salt_length < 1:
            raise InvalidParametersError("Salt length must be positive.")
        if not MIN_NONCE_LENGTH <= self.nonce_length <= MAX_NONCE_LENGTH:
            raise InvalidParametersError(
                f"Nonce length must be between {MIN_NONCE_LENGTH} and "
                f"{MAX_NONCE_LENGTH} bytes."
            )

    @property
    def nonce_offset(self) -> int:
        return self.salt_length

    @property
    def header_length(self) -> int:
        return self.salt_length + self.nonce_length

    @property
    def min_container_length(self) -> int:
        return self.header_length + self.tag_length


DEFAULT_SETTINGS = CryptoSettings()
