# utils/__init__.py
#
# Shared utility functions package.
# Re-exports the public helpers so callers can import from ``utils`` directly.

from utils.type_coercion import UNDEFINED, LogValue, Undefined, coerce_to_display_str
from utils.text import capitalize_words
from utils.users import filter_active_users, is_active_user
from utils.action_log import (
    format_action_log,
    format_iso_timestamp,
    log_action,
)

__all__ = [
    # Type coercion
    "UNDEFINED",
    "LogValue",
    "Undefined",
    "coerce_to_display_str",
    # Text utilities
    "capitalize_words",
    # User record utilities
    "filter_active_users",
    "is_active_user",
    # Action log utilities
    "format_action_log",
    "format_iso_timestamp",
    "log_action",
]
