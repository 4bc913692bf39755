"""PBKDF2 key derivation from a user password."""

from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..common.constants import KEY_LENGTH, PBKDF2_ITERATIONS, SALT_LENGTH
from ..utils import InvalidParametersError


def derive_key(
    password: Union[str, bytes, bytearray],
    salt: bytes,
    iterations: int = PBKDF2_ITERATIONS,
    salt_length: int = SALT_LENGTH,
) -> bytes:
    """
    Derive a 256-bit encryption key from password using PBKDF2.

    Args:
        password: User password (str is encoded as UTF-8)
        salt: Salt of ``salt_length`` bytes
        iterations: PBKDF2-HMAC-SHA256 iteration count
        salt_length: Expected salt size

    Returns:
        32-byte encryption key

    Raises:
        InvalidParametersError: If salt length or iteration count is invalid
    """
    if len(salt) != salt_length:
        raise InvalidParametersError(
            f"Salt must be {salt_length} bytes, got {len(salt)}."
        )
    if iterations < 1:
        raise InvalidParametersError("Iteration count must be positive.")
    if isinstance(password, str):
        password = password.encode("utf-8")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=bytes(salt),
        iterations=iterations,
    )
    return kdf.derive(password)
