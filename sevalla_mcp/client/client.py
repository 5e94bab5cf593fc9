"""Sevalla API client.

Provides an async client for the Sevalla v2 REST API with bounded retry.

Usage:
    from sevalla_mcp.client import SevallaClient
    from sevalla_mcp.config import ClientConfig

    config = ClientConfig(api_key="...", company_id="...")
    async with SevallaClient(config) as client:
        apps = await client.list_applications()
"""

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from sevalla_mcp.client.errors import (
    APIError,
    AuthenticationError,
    RetriesExhaustedError,
    SevallaClientError,
    TransportError,
)
from sevalla_mcp.client.query import build_query
from sevalla_mcp.client.retry import Outcome, RetryPolicy, classify
from sevalla_mcp.config.models import ClientConfig
from sevalla_mcp.models.requests import (
    CreateDatabaseRequest,
    CreateInternalConnectionRequest,
    CreatePreviewAppRequest,
    DeployStaticSiteRequest,
    PaginationParams,
    PromoteApplicationRequest,
    StartDeploymentRequest,
    UpdateApplicationRequest,
    UpdateDatabaseRequest,
    UpdateProcessRequest,
    UpdateStaticSiteRequest,
)
from sevalla_mcp.observability.logging import get_logger
from sevalla_mcp.observability.metrics import API_REQUEST_COUNT, API_RETRY_COUNT

logger = get_logger(__name__)

Body = BaseModel | Mapping[str, Any]
Sleep = Callable[[float], Awaitable[None]]


def _payload(body: Body | None) -> dict[str, Any] | None:
    """Serialize a request body, dropping unset optional fields."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(exclude_none=True)
    return {key: value for key, value in body.items() if value is not None}


class SevallaClient:
    """Async client for the Sevalla API.

    Every call goes through `request`, which owns authentication headers,
    retry and error classification. The remaining methods only shape a
    path, query string and body.

    Attributes:
        config: Immutable connection settings
        policy: Retry schedule derived from config.max_attempts
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """Initialize the client.

        Args:
            config: Connection settings (base URL, credential, company)
            transport: Optional httpx transport, used by tests
            sleep: Coroutine used for backoff waits
        """
        self.config = config
        self.policy = RetryPolicy(max_attempts=config.max_attempts)
        self._sleep = sleep
        self._client = httpx.AsyncClient(timeout=config.timeout, transport=transport)

    async def __aenter__(self) -> "SevallaClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @property
    def company_id(self) -> str:
        return self.config.company_id

    def _headers(self, has_body: bool) -> dict[str, str]:
        """Build request headers."""
        headers = {
            "Authorization": f"Bearer {self.config.api_key.get_secret_value()}",
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Body | None = None,
    ) -> Any:
        """Make an API request with retry.

        Args:
            method: HTTP method
            path: Path below the base URL, query string included
            json: Optional request body

        Returns:
            Decoded JSON response, or {} for 204 No Content

        Raises:
            AuthenticationError: On 401/403, without retrying
            APIError: On other non-2xx statuses once attempts run out
            TransportError: On network or decoding failure once attempts run out
            RetriesExhaustedError: If the final attempt was rate limited
        """
        url = f"{self.config.base_url}{path}"
        payload = _payload(json)
        headers = self._headers(has_body=payload is not None)
        log = logger.bind(method=method, path=path)

        for attempt in range(self.policy.max_attempts):
            try:
                response = await self._client.request(method, url, headers=headers, json=payload)
                API_REQUEST_COUNT.labels(method=method, status=str(response.status_code)).inc()
                outcome = classify(response.status_code)

                if outcome is Outcome.RATE_LIMITED:
                    # Consumes an attempt but never raises on its own
                    delay = self.policy.rate_limit_delay(
                        attempt, response.headers.get("Retry-After")
                    )
                    log.warning("rate_limited", attempt=attempt + 1, delay_seconds=delay)
                    API_RETRY_COUNT.labels(reason=outcome.value).inc()
                    await self._sleep(delay)
                    continue

                if outcome is Outcome.AUTH_FAILED:
                    raise AuthenticationError(response.status_code, response.text)

                if outcome is Outcome.NO_CONTENT:
                    return {}

                if outcome is Outcome.API_ERROR:
                    raise APIError(response.status_code, response.text)

                return response.json()

            except AuthenticationError:
                raise
            except (APIError, httpx.HTTPError, ValueError) as exc:
                error = exc if isinstance(exc, SevallaClientError) else TransportError(
                    str(exc) or type(exc).__name__
                )
                if self.policy.is_last(attempt):
                    if error is exc:
                        raise
                    raise error from exc

                delay = self.policy.failure_delay(attempt)
                log.warning(
                    "request_retry",
                    attempt=attempt + 1,
                    delay_seconds=delay,
                    error=error.message,
                )
                API_RETRY_COUNT.labels(
                    reason="api_error" if isinstance(error, APIError) else "transport"
                ).inc()
                await self._sleep(delay)

        raise RetriesExhaustedError(self.policy.max_attempts)

    def _company_query(self, pagination: PaginationParams | None = None) -> str:
        pagination = pagination or PaginationParams()
        return build_query(
            {
                "company": self.company_id,
                "limit": pagination.limit,
                "offset": pagination.offset,
            }
        )

    # Company
    async def get_company_users(self) -> Any:
        """List users belonging to the company."""
        return await self.request("GET", f"/company/{self.company_id}/users")

    async def get_usage(self, period_offset: int | None = None) -> Any:
        """Get PaaS usage for a billing period (0 = current)."""
        query = build_query({"period_offset": period_offset})
        return await self.request("GET", f"/company/{self.company_id}/paas-usage{query}")

    # Applications
    async def list_applications(self, pagination: PaginationParams | None = None) -> Any:
        return await self.request("GET", f"/applications{self._company_query(pagination)}")

    async def get_application(self, app_id: str) -> Any:
        return await self.request("GET", f"/applications/{app_id}{self._company_query()}")

    async def update_application(
        self, app_id: str, updates: UpdateApplicationRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request("PUT", f"/applications/{app_id}", json=updates)

    async def delete_application(self, app_id: str) -> None:
        await self.request("DELETE", f"/applications/{app_id}{self._company_query()}")

    async def promote_application(self, body: PromoteApplicationRequest) -> Any:
        return await self.request("POST", "/applications/promote", json=body)

    # Processes
    async def get_process(self, process_id: str) -> Any:
        return await self.request(
            "GET", f"/applications/processes/{process_id}{self._company_query()}"
        )

    async def update_process(
        self, process_id: str, updates: UpdateProcessRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request("PUT", f"/applications/processes/{process_id}", json=updates)

    # Networking
    async def create_internal_connection(
        self, app_id: str, body: CreateInternalConnectionRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request(
            "POST", f"/applications/{app_id}/internal-connections", json=body
        )

    async def toggle_cdn(self, app_id: str, enabled: bool) -> Any:
        return await self.request(
            "POST", f"/applications/{app_id}/cdn/toggle-status", json={"enabled": enabled}
        )

    async def toggle_edge_cache(self, app_id: str, enabled: bool) -> Any:
        return await self.request(
            "POST", f"/applications/{app_id}/edge-cache/toggle-status", json={"enabled": enabled}
        )

    async def clear_cache(self, app_id: str) -> Any:
        return await self.request("POST", f"/applications/{app_id}/clear-cache")

    # Deployments
    async def get_deployment(self, deployment_id: str) -> Any:
        return await self.request(
            "GET", f"/applications/deployments/{deployment_id}{self._company_query()}"
        )

    async def start_deployment(self, body: StartDeploymentRequest) -> Any:
        return await self.request("POST", "/applications/deployments", json=body)

    # Pipelines
    async def list_pipelines(self, pagination: PaginationParams | None = None) -> Any:
        return await self.request("GET", f"/pipelines{self._company_query(pagination)}")

    async def create_preview_app(
        self, pipeline_id: str, body: CreatePreviewAppRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request(
            "POST", f"/pipelines/{pipeline_id}/create-preview-app", json=body
        )

    # Databases
    async def list_databases(self, pagination: PaginationParams | None = None) -> Any:
        return await self.request("GET", f"/databases{self._company_query(pagination)}")

    async def get_database(self, database_id: str) -> Any:
        return await self.request("GET", f"/databases/{database_id}")

    async def create_database(self, body: CreateDatabaseRequest) -> Any:
        """Create a database; the company is injected into the body."""
        payload = {**body.model_dump(exclude_none=True), "company": self.company_id}
        return await self.request("POST", "/databases", json=payload)

    async def update_database(
        self, database_id: str, updates: UpdateDatabaseRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request("PUT", f"/databases/{database_id}", json=updates)

    async def delete_database(self, database_id: str) -> None:
        await self.request("DELETE", f"/databases/{database_id}")

    # Static sites
    async def list_static_sites(self, pagination: PaginationParams | None = None) -> Any:
        return await self.request("GET", f"/static-sites{self._company_query(pagination)}")

    async def get_static_site(self, static_site_id: str) -> Any:
        return await self.request("GET", f"/static-sites/{static_site_id}")

    async def update_static_site(
        self, static_site_id: str, updates: UpdateStaticSiteRequest | Mapping[str, Any]
    ) -> Any:
        return await self.request("PUT", f"/static-sites/{static_site_id}", json=updates)

    async def delete_static_site(self, static_site_id: str) -> None:
        await self.request("DELETE", f"/static-sites/{static_site_id}")

    async def get_static_site_deployment(self, deployment_id: str) -> Any:
        return await self.request("GET", f"/static-site-deployments/{deployment_id}")

    async def deploy_static_site(self, body: DeployStaticSiteRequest) -> Any:
        return await self.request("POST", "/static-site-deployments", json=body)
