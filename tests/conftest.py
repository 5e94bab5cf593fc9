"""Shared test fixtures for the sevalla_mcp test suite."""

from collections.abc import Callable, Generator

import httpx
import pytest

from sevalla_mcp.client import SevallaClient
from sevalla_mcp.config import ClientConfig, get_settings
from tests.factories import API_KEY, COMPANY_ID, FakeAPI, json_response


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, company_id=COMPANY_ID)


@pytest.fixture
def make_client(
    client_config: ClientConfig,
) -> Callable[..., tuple[SevallaClient, FakeAPI]]:
    """Factory fixture returning a client wired to a FakeAPI.

    Usage:
        def test_something(make_client):
            client, api = make_client(json_response({"ok": True}))
    """

    def _make(
        *script: httpx.Response | Exception,
        config: ClientConfig | None = None,
    ) -> tuple[SevallaClient, FakeAPI]:
        api = FakeAPI(script=list(script) or [json_response({})])
        client = SevallaClient(
            config or client_config,
            transport=httpx.MockTransport(api.handler),
            sleep=api.sleep,
        )
        return client, api

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
