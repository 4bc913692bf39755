"""Scoped holders for passwords and derived keys."""

from __future__ import annotations

from typing import Optional, Union

SecretInput = Union[str, bytes, bytearray, memoryview]


class SecretBuffer:
    """
    Mutable copy of a secret that is overwritten when the scope ends.

    Python offers no guarantee that other copies (interned strings, library
    internals) are gone, but the buffer owned here is always zeroed, on
    normal exit and when an exception propagates.

    Usage::

        with SecretBuffer(password) as secret:
            key = derive_key(secret.view, salt)
    """

    def __init__(self, value: SecretInput) -> None:
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._buffer: Optional[bytearray] = bytearray(value)

    def __enter__(self) -> "SecretBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __len__(self) -> int:
        return len(self._buffer) if self._buffer is not None else 0

    def __repr__(self) -> str:
        state = "wiped" if self._buffer is None else f"{len(self)} bytes"
        return f"<SecretBuffer {state}>"

    @property
    def view(self) -> bytearray:
        """The live buffer. Do not keep references past the ``with`` block."""
        if self._buffer is None:
            raise RuntimeError("Secret has already been wiped.")
        return self._buffer

    @property
    def wiped(self) -> bool:
        return self._buffer is None

    def wipe(self) -> None:
        """Overwrite the buffer with zeros and drop it."""
        if self._buffer is None:
            return
        self._buffer[:] = bytes(len(self._buffer))
        self._buffer = None
