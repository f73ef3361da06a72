# tests/conftest.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import logging

# Import pytest early so fixtures below can be registered
import pytest


@pytest.fixture(autouse=True)
def _reset_user_utils_env(monkeypatch):
    """Keep a developer's USER_UTILS_LOG_LEVEL from leaking into config tests."""
    monkeypatch.delenv("USER_UTILS_LOG_LEVEL", raising=False)


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the utils package."""
    caplog.set_level(logging.DEBUG, logger="utils")
    return caplog


# Register fixtures from test_utils without an "unused import".
pytest_plugins = ["test_utils"]
