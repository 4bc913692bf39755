"""Configuration management for filecrypt.

Only ambient settings live here. The cryptographic parameters are fixed in
:mod:`filecrypt.common.constants` and cannot be changed from the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from dotenv import load_dotenv

from .common.constants import DEFAULT_SUFFIX
from .utils import ConfigError
ENV_LOG_LEVEL = "FILECRYPT_LOG_LEVEL"
ENV_SUFFIX = "FILECRYPT_SUFFIX"
ENV_PASSWORD = "FILECRYPT_PASSWORD"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_path() -> Path:
    return Path.cwd() / ".env"


@dataclass(frozen=True)
class Config:
    """Singleton configuration object."""

    log_level: int
    encrypted_suffix: str
    password: Optional[str] = None

    _instance: ClassVar[Optional["Config"]] = None

    def __repr__(self) -> str:
        masked = "***" if self.password else None
        return (
            f"Config(log_level={logging.getLevelName(self.log_level)}, "
            f"encrypted_suffix={self.encrypted_suffix!r}, password={masked})"
        )

    @classmethod
    def get_instance(cls) -> "Config":
        """
        Retrieve a singleton instance of Config.

        Returns:
            Config singleton instance.
        """
        if cls._instance is None:
            cls._instance = load_config()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the cached instance so the next lookup reloads."""
        cls._instance = None


def _parse_log_level(value: str) -> int:
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigError(
            f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}."
        )
    return getattr(logging, name)


def _parse_suffix(value: str) -> str:
    suffix = value.strip()
    if not suffix.startswith(".") or len(suffix) < 2:
        raise ConfigError(f"{ENV_SUFFIX} must look like '.enc'.")
    if os.sep in suffix or "/" in suffix:
        raise ConfigError(f"{ENV_SUFFIX} must not contain path separators.")
    return suffix


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load and validate configuration from the .env file and environment.

    Variables already present in the environment take precedence over the
    .env file.

    Args:
        env_file: Optional explicit .env path (defaults to ./.env).

    Returns:
        Config instance.
    """
    env_file = env_file or _env_path()
    if env_file.exists():
        load_dotenv(env_file)

    log_level = os.getenv(ENV_LOG_LEVEL, "INFO")
    suffix = os.getenv(ENV_SUFFIX, DEFAULT_SUFFIX)
    password = os.getenv(ENV_PASSWORD) or None

    return Config(
        log_level=_parse_log_level(log_level),
        encrypted_suffix=_parse_suffix(suffix),
        password=password,
    )
