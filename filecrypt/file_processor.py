"""File helpers: whole-file reads, atomic writes and output naming."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .common.constants import DECRYPTED_SUFFIX, DEFAULT_SUFFIX
from .utils import FileAccessError, atomic_write_bytes


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
MODES = ("encrypt", "decrypt")


def read_file_bytes(path: PathLike) -> bytes:
    """
    Read a whole file into memory.

    Args:
        path: File to read.

    Returns:
        File contents.
    """
    path = Path(path)
    if not path.is_file():
        raise FileAccessError(f"Could not open file {path}: not a regular file.")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(f"Error reading file at path: {path}") from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def write_file_bytes(path: PathLike, data: bytes) -> None:
    """
    Write a whole file atomically.

    Args:
        path: Destination path.
        data: Bytes to write.
    """
    path = Path(path)
    try:
        atomic_write_bytes(path, data)
    except OSError as exc:
        raise FileAccessError(f"Error writing to file at path: {path}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)


def default_output_path(
    input_path: PathLike, mode: str, suffix: str = DEFAULT_SUFFIX
) -> Path:
    """
    Pick an output path next to the input.

    Encrypting appends ``suffix``. Decrypting strips it when present and
    otherwise appends ``.dec``.

    Args:
        input_path: Source file path.
        mode: "encrypt" or "decrypt".
        suffix: Encrypted file suffix.

    Returns:
        Output path.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")
    input_path = Path(input_path)
    if mode == "encrypt":
        return input_path.with_name(input_path.name + suffix)
    if input_path.name.endswith(suffix) and len(input_path.name) > len(suffix):
        return input_path.with_name(input_path.name[: -len(suffix)])
    return input_path.with_name(input_path.name + DECRYPTED_SUFFIX)
