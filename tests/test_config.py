"""Tests for settings parsing and logging setup."""

from __future__ import annotations

import logging

from jay_auto_api.app.core.config import Settings, _split_csv
from jay_auto_api.app.core.logging_config import setup_logging


def test_split_csv_drops_blanks():
    assert _split_csv("https://a.com, ,https://b.com,") == ["https://a.com", "https://b.com"]


def test_settings_instances_do_not_share_origin_lists():
    first, second = Settings(), Settings()
    first.cors_origins.append("https://extra.example")
    assert "https://extra.example" not in second.cors_origins


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    handlers = list(root.handlers)

    setup_logging("DEBUG")

    assert root.handlers == handlers
    assert root.level == logging.DEBUG
    setup_logging("INFO")
