"""Shared fixtures for certjson tests."""

import pytest

from certjson.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty directory so relative output names land there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
