"""Pytest configuration and shared fixtures for github-artifact-client tests."""

import httpx
import pytest

from github_artifact_client.testing import FakeContentsAPI


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing account configuration.
    """
    import os

    test_prefixes = ("TEST_", "GITHUB_ARTIFACT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def fake_api():
    """A fake GitHub contents API recording every request."""
    return FakeContentsAPI()


@pytest.fixture
async def http_client(fake_api):
    """An async HTTP client whose requests are served by fake_api."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api)) as client:
        yield client
