# clock.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

from datetime import UTC, datetime, timezone
from typing import Optional


class Clock:
    """
    Singleton class that provides the current time.

    Code that needs "now" reads it through this object so tests can swap in a
    fake clock, either by passing one explicitly or by monkeypatching the
    module-level ``clock`` where it is imported.
    """

    _instance: Optional["Clock"] = None

    def __new__(cls) -> "Clock":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def now(self, tz: timezone | None = None) -> datetime:
        """Get the current time."""
        return datetime.now(tz)

    def utcnow(self) -> datetime:
        """Get the current UTC time as an aware datetime."""
        return datetime.now(UTC)


# Global singleton instance
clock = Clock()
