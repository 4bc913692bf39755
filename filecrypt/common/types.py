"""Type definitions and data models."""

from dataclasses import dataclass
from typing import Any, Dict

from .constants import TAG_LENGTH


@dataclass(frozen=True)
class Container:
    """An encrypted container: public header fields plus sealed payload."""
    salt: bytes
    nonce: bytes
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        """Serialize to the on-disk layout."""
        return self.salt + self.nonce + self.ciphertext

    @property
    def plaintext_size(self) -> int:
        """Size of the original data, derived from the payload length."""
        return max(len(self.ciphertext) - TAG_LENGTH, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a printable dictionary (hex-encoded header)."""
        return {
            "salt": self.salt.hex(),
            "nonce": self.nonce.hex(),
            "payload_size": len(self.ciphertext),
            "plaintext_size": self.plaintext_size,
            "total_size": len(self.salt) + len(self.nonce) + len(self.ciphertext),
        }
