"""Pytest hooks and fixtures."""

import os

import pytest

from randomorg.config.loader import clear_config_cache


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "live: calls the real random.org API (needs RANDOM_ORG_API_KEY; skipped in CI)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip live tests in CI or when no API key is available."""
    if os.environ.get("CI") != "true" and os.environ.get("RANDOM_ORG_API_KEY"):
        return
    skip = pytest.mark.skip(reason="Requires RANDOM_ORG_API_KEY (skipped in CI)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point ~ at a temp dir and drop RANDOM_ORG_* env so config is deterministic."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.upper().startswith("RANDOM_ORG_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield tmp_path
    clear_config_cache()
