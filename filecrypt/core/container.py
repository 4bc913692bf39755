"""Encrypted container layout: salt, nonce, then ciphertext with tag.

    offset  0  salt        16 bytes
    offset 16  nonce       12 bytes
    offset 28  ciphertext  len(plaintext) + 16 bytes (tag last)

The format carries no magic and no version byte.
"""

from ..common.constants import DEFAULT_SETTINGS, CryptoSettings
from ..common.types import Container
from ..utils import InvalidParametersError, MalformedContainerError


def serialize(
    salt: bytes,
    nonce: bytes,
    ciphertext: bytes,
    settings: CryptoSettings = DEFAULT_SETTINGS,
) -> bytes:
    """
    Build container bytes.

    Args:
        salt: KDF salt
        nonce: GCM nonce
        ciphertext: Ciphertext followed by the tag

    Returns:
        Container bytes
    """
    if len(salt) != settings.salt_length:
        raise InvalidParametersError(
            f"Salt must be {settings.salt_length} bytes, got {len(salt)}."
        )
    if len(nonce) != settings.nonce_length:
        raise InvalidParametersError(
            f"Nonce must be {settings.nonce_length} bytes, got {len(nonce)}."
        )
    return Container(salt=salt, nonce=nonce, ciphertext=ciphertext).to_bytes()


def parse(data: bytes, settings: CryptoSettings = DEFAULT_SETTINGS) -> Container:
    """
    Split container bytes into header fields and payload.

    Anything shorter than header plus tag cannot have come from an
    encryption and is rejected before any cryptography runs.

    Args:
        data: Container bytes

    Returns:
        Parsed container

    Raises:
        MalformedContainerError: If data is too short
    """
    if len(data) < settings.min_container_length:
        raise MalformedContainerError(
            f"Not a valid encrypted file: {len(data)} bytes is shorter than "
            f"the {settings.min_container_length}-byte minimum."
        )
    data = bytes(data)
    return Container(
        salt=data[:settings.nonce_offset],
        nonce=data[settings.nonce_offset:settings.header_length],
        ciphertext=data[settings.header_length:],
    )
