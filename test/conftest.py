from __future__ import annotations

from pathlib import Path
from typing import Iterable

import httpx
import pytest
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from chapa_client.config import ChapaSettings

TEST_ROOT = Path(__file__).resolve().parent


class SandboxSettings(ChapaSettings):
    """
    Test environment settings model.

    Properties are bound from environment variables and the test/.env file,
    on top of the regular ``CHAPA_*`` client settings.
    """

    model_config = SettingsConfigDict(
        env_file=str(TEST_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    run_smoke_tests: bool = Field(
        default=False,
        alias="CHAPA_RUN_SMOKE_TESTS",
        description="Enable smoke tests against the Chapa sandbox (needs CHAPA_API_KEY)",
    )


@pytest.fixture(scope="session")
def test_config() -> SandboxSettings:
    """Fixture providing test configuration from the Pydantic settings model."""
    return SandboxSettings()


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_sync = httpx.Client.request
    orig_async = httpx.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx.AsyncClient, "request", offline_async, raising=True)
