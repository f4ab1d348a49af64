"""Pytest configuration and shared fixtures."""

import logging

import pytest


logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    """Keep developer environment variables from leaking into settings under test."""
    for name in (
        "CHECKLIST_PATH",
        "OPERATOR_ID",
        "DEFAULT_BUSINESS_NAME",
        "DEFAULT_BUSINESS_SHORT_NAME",
        "OPENROUTER_API_KEY",
        "MODEL_ID",
        "LOGFIRE_TOKEN",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
