"""Pytest configuration and shared fixtures for clever-client tests."""

import dataclasses

import pytest

from clever import CleverClient, Configuration
from clever.config import get_default_configuration
from clever.testing import StubExecutor


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Clever environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("CLEVER_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture(autouse=True)
def reset_default_configuration():
    """Restore the process-wide default configuration after each test."""
    default = get_default_configuration()
    saved = dataclasses.asdict(default)

    yield

    for name, value in saved.items():
        setattr(default, name, value)


@pytest.fixture
def api_key_config():
    return Configuration(api_key="DEMO_KEY")


@pytest.fixture
def token_config():
    return Configuration(token="DISTRICT_TOKEN")


@pytest.fixture
def stub_executor():
    return StubExecutor()


@pytest.fixture
def client(token_config, stub_executor):
    """Client wired to a stub executor; queue responses on ``stub_executor``."""
    return CleverClient(config=token_config, executor=stub_executor)
