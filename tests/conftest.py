"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate tests from SCHWAB_* variables and the cached settings."""
    from src.schwab_api.config import get_settings

    for var in ("SCHWAB_BASE_URL", "SCHWAB_REQUEST_TIMEOUT", "SCHWAB_FOLLOW_REDIRECTS",
                "SCHWAB_LOG_LEVEL", "SCHWAB_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def credentials():
    from src.schwab_api.models import Credentials
    return Credentials(app_key="KEY", app_secret="SECRET", access_token="TOKEN")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code: int = 200, json=None, headers=None, content=None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, headers=headers, content=content)
            return httpx.Response(status_code, headers=headers, json=json if json is not None else {})

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_transport():
    """Factory for a RecordingTransport returning a canned response."""
    return RecordingTransport
