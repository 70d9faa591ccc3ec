"""Environment-driven configuration for cipherkit."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_KEY_DIR, DEFAULT_LOG_LEVEL, ENV_KEY_DIR, ENV_LOG_LEVEL
from .errors import ConfigError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class CipherKitConfig:
    """Configuration for the cipherkit command line.

    Attributes:
        log_level: Name of the logging level, e.g. ``"INFO"``.
        key_dir: Default output directory for generated keys.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    key_dir: Path = Path(DEFAULT_KEY_DIR)

    @property
    def log_level_number(self) -> int:
        """The numeric logging level."""
        return logging.getLevelName(self.log_level)


def load_config(dotenv: bool = True) -> CipherKitConfig:
    """Build a config from environment variables.

    Args:
        dotenv: Whether to load a ``.env`` file from the working directory
            (or its parents) into the environment first.
            Variables already set take precedence.

    Returns:
        The resolved configuration.

    Raises:
        ConfigError: If the log level is not a known level name.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in _LEVELS:
        raise ConfigError(
            f"Invalid {ENV_LOG_LEVEL}: {level!r}. Expected one of {', '.join(_LEVELS)}"
        )
    key_dir = Path(os.getenv(ENV_KEY_DIR, DEFAULT_KEY_DIR))
    return CipherKitConfig(log_level=level, key_dir=key_dir)
