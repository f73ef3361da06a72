# tests/test_config.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import importlib
import logging

import pytest


def _reload_config():
    import config

    return importlib.reload(config)


def test_log_level_defaults_to_info():
    config = _reload_config()
    assert config.LOG_LEVEL_NAME == "INFO"
    assert config.LOG_LEVEL == logging.INFO


@pytest.mark.parametrize("raw, expected", [("debug", logging.DEBUG), (" WARNING ", logging.WARNING)])
def test_log_level_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("USER_UTILS_LOG_LEVEL", raw)
    config = _reload_config()
    assert config.LOG_LEVEL == expected


@pytest.mark.parametrize("raw", ["", "   ", "chatty", "basic_format"])
def test_log_level_falls_back_on_invalid_values(monkeypatch, raw):
    monkeypatch.setenv("USER_UTILS_LOG_LEVEL", raw)
    config = _reload_config()
    assert config.LOG_LEVEL_NAME == "INFO"


def test_configure_logging_uses_given_level(monkeypatch):
    config = _reload_config()
    calls = []
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    config.configure_logging()
    config.configure_logging(logging.DEBUG)

    assert calls == [{"level": logging.INFO}, {"level": logging.DEBUG}]
