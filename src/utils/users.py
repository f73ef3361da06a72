# src/utils/users.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Helpers for working with user records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

ACTIVE_FIELD = "isActive"


def is_active_user(record: Any) -> bool:
    """
    Return True only when the record's ``isActive`` field is the boolean True.

    Records without the field, with a differently named field (``active``),
    or with a truthy non-boolean value (``1``, ``"true"``) are inactive.
    """
    if not isinstance(record, Mapping):
        return False
    return record.get(ACTIVE_FIELD) is True


def filter_active_users(users: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """
    Return the active users in their original order.

    The returned list holds the same record objects as the input; nothing is
    copied or mutated.
    """
    if users is None or isinstance(users, (str, bytes, Mapping)) or not isinstance(users, Iterable):
        raise TypeError(f"filter_active_users expects a sequence of records, got {type(users).__name__}")

    users = list(users)
    active = [user for user in users if is_active_user(user)]
    logger.debug(f"Kept {len(active)} of {len(users)} users as active")
    return active
