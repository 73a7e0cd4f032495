from __future__ import annotations

from typing import Iterator

import httpx
import pytest

from direct_link_sdk.core.config import reset_settings

DIRECT_LINK_ENV_VARS = (
    "DIRECT_LINK_URL",
    "DIRECT_LINK_VERSION",
    "DIRECT_LINK_AUTH_TOKEN",
    "DIRECT_LINK_TIMEOUT",
    "DIRECT_LINK_MAX_RETRIES",
    "DIRECT_LINK_RETRY_INTERVAL",
    "DIRECT_LINK_LOG_LEVEL",
    "DIRECT_LINK_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Block every request that would leave the process.

    Tests inject ``httpx.MockTransport``; only the real network transports are
    patched, so mocked clients keep working.
    """

    def offline_sync(self, request: httpx.Request) -> httpx.Response:
        raise RuntimeError(f"External HTTP blocked by global offline guard: {request.url}")

    async def offline_async(self, request: httpx.Request) -> httpx.Response:
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {request.url}")

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", offline_sync, raising=True)
    monkeypatch.setattr(httpx.AsyncHTTPTransport, "handle_async_request", offline_async, raising=True)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep DIRECT_LINK_* variables and ``.env`` files of the host out of tests."""
    for name in DIRECT_LINK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
