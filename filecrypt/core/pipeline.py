"""Password-based encryption and decryption of whole byte strings."""

from __future__ import annotations

import logging
from typing import Optional

from ..common.constants import DEFAULT_SETTINGS, CryptoSettings
from . import cipher, container, kdf
from .random_source import RandomSource, generate_nonce, generate_salt, random_bytes
from .secret import SecretBuffer, SecretInput


logger = logging.getLogger(__name__)


class Pipeline:
    """
    Wires random source, key derivation, cipher and container codec.

    Instances hold no per-call state, so one instance can serve any number
    of calls. Every call draws its own salt and nonce and derives its own
    key; the password copy and the key are wiped before the call returns,
    whether it succeeds or raises.
    """

    def __init__(
        self,
        settings: CryptoSettings = DEFAULT_SETTINGS,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.settings = settings
        self._random = random_source or random_bytes

    def _derive(self, password: SecretBuffer, salt: bytes) -> SecretBuffer:
        key = kdf.derive_key(
            password.view, salt, self.settings.iterations, self.settings.salt_length
        )
        try:
            return SecretBuffer(key)
        finally:
            del key

    def encrypt(self, password: SecretInput, plaintext: bytes) -> bytes:
        """
        Encrypt data under a password.

        Args:
            password: User password
            plaintext: Data to encrypt (may be empty)

        Returns:
            Container bytes: salt + nonce + ciphertext + tag
        """
        salt = generate_salt(self.settings.salt_length, self._random)
        nonce = generate_nonce(self.settings.nonce_length, self._random)

        with SecretBuffer(password) as secret:
            with self._derive(secret, salt) as key:
                sealed = cipher.seal(
                    key.view, nonce, plaintext, self.settings.nonce_length
                )

        data = container.serialize(salt, nonce, sealed, self.settings)
        logger.debug(
            "Encrypted %d bytes into %d-byte container", len(plaintext), len(data)
        )
        return data

    def decrypt(self, password: SecretInput, data: bytes) -> bytes:
        """
        Decrypt container bytes produced by :meth:`encrypt`.

        Args:
            password: User password
            data: Container bytes

        Returns:
            The original plaintext

        Raises:
            MalformedContainerError: If data is not a valid container
            AuthenticationFailedError: If the password is wrong or data was altered
        """
        parsed = container.parse(data, self.settings)

        with SecretBuffer(password) as secret:
            with self._derive(secret, parsed.salt) as key:
                plaintext = cipher.open_(
                    key.view,
                    parsed.nonce,
                    parsed.ciphertext,
                    self.settings.nonce_length,
                )

        logger.debug(
            "Decrypted %d-byte container into %d bytes", len(data), len(plaintext)
        )
        return plaintext


_default_pipeline = Pipeline()


def get_pipeline() -> Pipeline:
    return _default_pipeline


def encrypt(password: SecretInput, plaintext: bytes) -> bytes:
    """Encrypt with the fixed default parameters."""
    return get_pipeline().encrypt(password, plaintext)


def decrypt(password: SecretInput, data: bytes) -> bytes:
    """Decrypt with the fixed default parameters."""
    return get_pipeline().decrypt(password, data)
