"""Shared utilities for the filecrypt tool."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union


class FileCryptError(Exception):
    """Base exception for filecrypt errors."""


class ConfigError(FileCryptError):
    """Raised when configuration is invalid or missing."""


class FileAccessError(FileCryptError):
    """Raised when an input or output file cannot be used."""


class EntropyUnavailableError(FileCryptError):
    """Raised when the operating system random source cannot be read."""


class InvalidParametersError(FileCryptError):
    """Raised when a key, nonce or salt has the wrong size (a caller bug)."""


class MalformedContainerError(FileCryptError):
    """Raised when input is not a structurally valid encrypted container."""


class AuthenticationFailedError(FileCryptError):
    """Raised when the authentication tag does not verify.

    Covers a wrong password, a corrupted file and a tampered file alike.
    """


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(log_level: int = logging.INFO) -> None:
    """
    Configure global logging.

    Args:
        log_level: Logging verbosity level.
    """
    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def format_bytes(size: int) -> str:
    """
    Convert bytes to a human-readable string.

    Args:
        size: Size in bytes.

    Returns:
        Human-readable size string.
    """
    if size < 0:
        raise ValueError("Size must be non-negative.")

    units = ["B", "KB", "MB", "GB", "TB"]
    value = float(size)
    for unit in units:
        if value < 1024 or unit == units[-1]:
            if unit == "B":
                return f"{int(value)} {unit}"
            return f"{value:.2f} {unit}"
        value /= 1024
    return f"{int(size)} B"


def clean_path(path_str: Union[str, Path]) -> Path:
    """Clean input paths from quotes and extra spaces."""
    cleaned = str(path_str).strip().strip("'").strip('"')
    cleaned = cleaned.replace("\\ ", " ")
    return Path(os.path.expanduser(cleaned))


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Write bytes atomically to a file.

    The data lands in a uniquely named sibling temporary file (mode 0600)
    first and replaces the destination only once it is fully flushed to disk.

    Args:
        path: Destination path.
        data: Bytes to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as file_handle:
            file_handle.write(data)
            file_handle.flush()
            os.fsync(file_handle.fileno())
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
