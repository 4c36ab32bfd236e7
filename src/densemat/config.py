"""
Global configuration for densemat.

Provides:
- The storage dtype (fixed to float64; not configurable)
- Default log level for the demo CLI, overridable via DENSEMAT_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
from typing import Union

import numpy as np

logger = logging.getLogger("densemat.config")

ENV_LOG_LEVEL = "DENSEMAT_LOG_LEVEL"

# All matrices store 64-bit floats.
STORAGE_DTYPE = np.dtype(np.float64)


_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_log_level(value: Union[int, str]) -> int:
    """
    Normalize a log level specification.

    Args:
        value: logging level int or one of 'debug', 'info', 'warning',
            'error', 'critical' (case-insensitive)

    Raises:
        ValueError: If the string is not a known level name
    """
    if isinstance(value, int):
        return value
    try:
        return _LEVEL_NAMES[value.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported log level: {value!r}. "
            f"Supported: {sorted(_LEVEL_NAMES)}"
        ) from None


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """Global configuration singleton."""

    def __init__(self):
        self._log_level = logging.WARNING

        env_level = os.environ.get(ENV_LOG_LEVEL)
        if env_level:
            try:
                self._log_level = parse_log_level(env_level)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r, falling back to %s",
                    ENV_LOG_LEVEL, env_level, logging.getLevelName(self._log_level),
                )

    @property
    def storage_dtype(self) -> np.dtype:
        """Storage dtype of every matrix (read-only)."""
        return STORAGE_DTYPE

    @property
    def log_level(self) -> int:
        """Get default log level."""
        return self._log_level

    @log_level.setter
    def log_level(self, value: Union[int, str]):
        self._log_level = parse_log_level(value)


_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the default log level used by the demo CLI.

    Example:
        >>> densemat.set_log_level('info')
    """
    _config.log_level = level


def get_log_level() -> int:
    """Get current default log level."""
    return _config.log_level
