"""Shared fixtures for cipherkit tests."""

from __future__ import annotations

import pytest

from cipherkit.constants import ENV_KEY_DIR, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of config-dependent tests.

    Setting before deleting makes monkeypatch remove anything a test (or a
    loaded .env file) adds during teardown.
    """
    for name in (ENV_LOG_LEVEL, ENV_KEY_DIR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
