# src/utils/action_log.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Audit strings describing who did what, and when."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from clock import clock
from utils.type_coercion import UNDEFINED, LogValue, coerce_to_display_str


class TimeSource(Protocol):
    def now(self, tz=None) -> datetime: ...


def format_iso_timestamp(moment: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to already be UTC. Sub-millisecond digits are
    truncated, e.g. "2024-01-01T12:00:00.000Z".
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    else:
        moment = moment.astimezone(UTC)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def format_action_log(action: LogValue, actor_id: LogValue, timestamp: str) -> str:
    actor_text = coerce_to_display_str(actor_id)
    action_text = coerce_to_display_str(action)
    return f"User {actor_text} performed {action_text} at {timestamp}"


def log_action(
    action: LogValue = UNDEFINED,
    actor_id: LogValue = UNDEFINED,
    *,
    time_source: TimeSource | None = None,
) -> str:
    """
    Build the audit string for ``actor_id`` performing ``action`` right now.

    Values are not validated or trimmed; omitted arguments render as
    "undefined" and None as "null". The clock is read exactly once.

    Args:
        action: What was done.
        actor_id: Who did it.
        time_source: Object with a ``now(tz)`` method; defaults to the global clock.

    Returns:
        "User <actor_id> performed <action> at <ISO-8601 UTC timestamp>"
    """
    source = clock if time_source is None else time_source
    timestamp = format_iso_timestamp(source.now(UTC))
    return format_action_log(action, actor_id, timestamp)
