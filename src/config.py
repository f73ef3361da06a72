# config.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import logging
import os

# Configuration constants loaded from environment variables

DEFAULT_LOG_LEVEL_NAME = "INFO"


def _get_optional_str(env_name: str) -> str | None:
    """Return stripped environment variable value or None if unset/empty."""
    value = os.environ.get(env_name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _parse_log_level_name() -> str:
    """Parse USER_UTILS_LOG_LEVEL, falling back to INFO for unknown level names."""
    name = (_get_optional_str("USER_UTILS_LOG_LEVEL") or DEFAULT_LOG_LEVEL_NAME).upper()
    if not isinstance(getattr(logging, name, None), int):
        return DEFAULT_LOG_LEVEL_NAME
    return name


LOG_LEVEL_NAME: str = _parse_log_level_name()
LOG_LEVEL: int = getattr(logging, LOG_LEVEL_NAME)


def configure_logging(level: int | None = None) -> None:
    """Configure root logging at the given level, or the configured LOG_LEVEL."""
    logging.basicConfig(level=LOG_LEVEL if level is None else level)
