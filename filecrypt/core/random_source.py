"""Operating-system backed random bytes for salts and nonces."""

import logging
import os
from typing import Callable

from ..common.constants import NONCE_LENGTH, SALT_LENGTH
from ..utils import EntropyUnavailableError, InvalidParametersError


logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


def random_bytes(length: int) -> bytes:
    """
    Return ``length`` bytes from the OS cryptographic random source.

    There is no fallback generator and no retry: a broken entropy source
    is fatal for the current operation.

    Args:
        length: Number of bytes to draw.

    Returns:
        Random bytes.

    Raises:
        InvalidParametersError: If length is negative.
        EntropyUnavailableError: If the OS source fails or returns short.
    """
    if length < 0:
        raise InvalidParametersError("Random byte count must be non-negative.")
    try:
        data = os.urandom(length)
    except (NotImplementedError, OSError) as exc:
        logger.error("OS random source unavailable: %s", exc)
        raise EntropyUnavailableError(
            "Secure random source is unavailable."
        ) from exc
    if len(data) != length:
        raise EntropyUnavailableError("Secure random source returned short read.")
    return data


def generate_salt(
    length: int = SALT_LENGTH, source: RandomSource = random_bytes
) -> bytes:
    """Return a fresh random KDF salt."""
    return source(length)


def generate_nonce(
    length: int = NONCE_LENGTH, source: RandomSource = random_bytes
) -> bytes:
    """Return a fresh random GCM nonce, drawn independently of any salt."""
    return source(length)
