"""Encrypt and decrypt files on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .core.pipeline import Pipeline, get_pipeline
from .core.secret import SecretInput
from .file_processor import PathLike, read_file_bytes, write_file_bytes
from .utils import FileAccessError, format_bytes


logger = logging.getLogger(__name__)


def _check_paths(input_path: Path, output_path: Path, overwrite: bool) -> None:
    if input_path.resolve() == output_path.resolve():
        raise FileAccessError("Input and output must be different files.")
    if output_path.exists() and not overwrite:
        raise FileAccessError(
            f"Output file already exists: {output_path} (use --force to overwrite)"
        )


def encrypt_file(
    input_path: PathLike,
    output_path: PathLike,
    password: SecretInput,
    overwrite: bool = False,
    pipeline: Optional[Pipeline] = None,
) -> int:
    """
    Encrypt a file into a container file.

    Args:
        input_path: Source file path.
        output_path: Encrypted file path.
        password: User password.
        overwrite: Replace an existing output file.
        pipeline: Pipeline to use (defaults to the fixed parameters).

    Returns:
        Number of bytes written.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    _check_paths(input_path, output_path, overwrite)

    plaintext = read_file_bytes(input_path)
    data = (pipeline or get_pipeline()).encrypt(password, plaintext)
    write_file_bytes(output_path, data)

    logger.info(
        "Encryption complete: %s (%s)", output_path, format_bytes(len(data))
    )
    return len(data)


def decrypt_file(
    input_path: PathLike,
    output_path: PathLike,
    password: SecretInput,
    overwrite: bool = False,
    pipeline: Optional[Pipeline] = None,
) -> int:
    """
    Decrypt a container file created by :func:`encrypt_file`.

    Nothing is written unless the whole container authenticates.

    Args:
        input_path: Encrypted file path.
        output_path: Output file path.
        password: User password.
        overwrite: Replace an existing output file.
        pipeline: Pipeline to use (defaults to the fixed parameters).

    Returns:
        Number of bytes written.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    _check_paths(input_path, output_path, overwrite)

    data = read_file_bytes(input_path)
    plaintext = (pipeline or get_pipeline()).decrypt(password, data)
    write_file_bytes(output_path, plaintext)

    logger.info(
        "Decryption complete, decrypted file saved at: %s (%s)",
        output_path,
        format_bytes(len(plaintext)),
    )
    return len(plaintext)
