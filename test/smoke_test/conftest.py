"""
Test infrastructure for smoke tests against the Chapa sandbox.

Smoke tests make real HTTPS calls, so the global offline guard is replaced by
a no-op here. They run only when ``CHAPA_RUN_SMOKE_TESTS=true`` and a test
secret key (``CHAPA_API_KEY``) is configured, e.g. in ``test/.env``.
"""

from __future__ import annotations

import pytest

from chapa_client.client import ChapaClient


@pytest.fixture(autouse=True)
def _global_offline_http_guard():
    yield


@pytest.fixture()
def sandbox_client(test_config):
    if not test_config.run_smoke_tests:
        pytest.skip("Chapa smoke tests disabled (set CHAPA_RUN_SMOKE_TESTS=true)")
    if not test_config.api_key:
        pytest.skip("CHAPA_API_KEY is not configured")
    with ChapaClient.from_settings(test_config) as client:
        yield client
