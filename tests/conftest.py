from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and GitHub settings out of the tests."""
    for name in ("GITHUB_API_URL", "GITHUB_ACTIVITY_TIMEOUT", "GITHUB_ACTIVITY_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
