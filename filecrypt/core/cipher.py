"""AES-256-GCM sealing and opening."""

from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..common.constants import KEY_LENGTH, NONCE_LENGTH, TAG_LENGTH
from ..utils import AuthenticationFailedError, InvalidParametersError

KeyInput = Union[bytes, bytearray]


def _check_parameters(key: KeyInput, nonce: bytes, nonce_length: int) -> None:
    if len(key) != KEY_LENGTH:
        raise InvalidParametersError(
            f"Key must be {KEY_LENGTH} bytes, got {len(key)}."
        )
    if len(nonce) != nonce_length:
        raise InvalidParametersError(
            f"Nonce must be {nonce_length} bytes, got {len(nonce)}."
        )


def seal(
    key: KeyInput, nonce: bytes, plaintext: bytes, nonce_length: int = NONCE_LENGTH
) -> bytes:
    """
    Encrypt and authenticate data using AES-256-GCM.

    No associated data is bound.

    Args:
        key: 32-byte key
        nonce: Nonce (12 bytes by default), never reused with the same key
        plaintext: Data to encrypt
        nonce_length: Expected nonce size

    Returns:
        Ciphertext followed by the 16-byte tag
    """
    _check_parameters(key, nonce, nonce_length)
    return AESGCM(key).encrypt(nonce, plaintext, None)


def open_(
    key: KeyInput, nonce: bytes, ciphertext: bytes, nonce_length: int = NONCE_LENGTH
) -> bytes:
    """
    Verify and decrypt AES-256-GCM data.

    The tag is checked before any plaintext is returned.

    Args:
        key: 32-byte key
        nonce: 12-byte nonce used at sealing time
        ciphertext: Ciphertext followed by the 16-byte tag
        nonce_length: Expected nonce size

    Returns:
        Decrypted data

    Raises:
        InvalidParametersError: If key or nonce has the wrong size
        AuthenticationFailedError: If the tag does not verify
    """
    _check_parameters(key, nonce, nonce_length)
    if len(ciphertext) < TAG_LENGTH:
        raise AuthenticationFailedError(
            "Decryption failed. Wrong password or corrupted data."
        )
    try:
        return AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        raise AuthenticationFailedError(
            "Decryption failed. Wrong password or corrupted data."
        ) from exc
