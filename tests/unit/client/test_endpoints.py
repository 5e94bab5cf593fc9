"""Unit tests for facade methods: method, URL and body per endpoint."""

import httpx
import pytest

from sevalla_mcp.models import (
    CreateDatabaseRequest,
    DeployStaticSiteRequest,
    PaginationParams,
    PromoteApplicationRequest,
    StartDeploymentRequest,
)
from tests.factories import BASE_URL, COMPANY_ID, json_response

COMPANY_QUERY = f"?company={COMPANY_ID}"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("call", "method", "url"),
    [
        (lambda c: c.get_company_users(), "GET", f"/company/{COMPANY_ID}/users"),
        (lambda c: c.get_usage(), "GET", f"/company/{COMPANY_ID}/paas-usage"),
        (lambda c: c.get_application("app-1"), "GET", f"/applications/app-1{COMPANY_QUERY}"),
        (lambda c: c.get_process("proc-1"), "GET", f"/applications/processes/proc-1{COMPANY_QUERY}"),
        (
            lambda c: c.get_deployment("dep-1"),
            "GET",
            f"/applications/deployments/dep-1{COMPANY_QUERY}",
        ),
        (lambda c: c.list_pipelines(), "GET", f"/pipelines{COMPANY_QUERY}"),
        (lambda c: c.list_databases(), "GET", f"/databases{COMPANY_QUERY}"),
        (lambda c: c.get_database("db-1"), "GET", "/databases/db-1"),
        (lambda c: c.list_static_sites(), "GET", f"/static-sites{COMPANY_QUERY}"),
        (lambda c: c.get_static_site("site-1"), "GET", "/static-sites/site-1"),
        (
            lambda c: c.get_static_site_deployment("sdep-1"),
            "GET",
            "/static-site-deployments/sdep-1",
        ),
        (lambda c: c.clear_cache("app-1"), "POST", "/applications/app-1/clear-cache"),
    ],
)
async def test_read_and_bodyless_endpoints(make_client, call, method: str, url: str) -> None:
    client, api = make_client(json_response({}))

    await call(client)

    assert len(api.captured) == 1
    assert api.captured[0].method == method
    assert api.captured[0].url == f"{BASE_URL}{url}"
    assert api.captured[0].body is None


class TestApplicationWrites:
    """Application write operations."""

    @pytest.mark.asyncio
    async def test_update_application(self, make_client) -> None:
        client, api = make_client(json_response({"app": {"id": "app-1"}}))

        await client.update_application("app-1", {"display_name": "Renamed"})

        assert api.captured[0].method == "PUT"
        assert api.captured[0].url == f"{BASE_URL}/applications/app-1"
        assert api.captured[0].body == {"display_name": "Renamed"}

    @pytest.mark.asyncio
    async def test_delete_application_includes_company(self, make_client) -> None:
        client, api = make_client(httpx.Response(204))

        await client.delete_application("app-1")

        assert api.captured[0].method == "DELETE"
        assert api.captured[0].url == f"{BASE_URL}/applications/app-1{COMPANY_QUERY}"

    @pytest.mark.asyncio
    async def test_promote_omits_unset_source(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.promote_application(
            PromoteApplicationRequest(app_id="app-1", pipeline_id="pipe-1")
        )

        assert api.captured[0].url == f"{BASE_URL}/applications/promote"
        assert api.captured[0].body == {"app_id": "app-1", "pipeline_id": "pipe-1"}


class TestNetworkingWrites:
    """CDN, edge cache and internal connection operations."""

    @pytest.mark.asyncio
    async def test_toggle_cdn(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.toggle_cdn("app-1", False)

        assert api.captured[0].url == f"{BASE_URL}/applications/app-1/cdn/toggle-status"
        assert api.captured[0].body == {"enabled": False}

    @pytest.mark.asyncio
    async def test_toggle_edge_cache(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.toggle_edge_cache("app-1", True)

        assert api.captured[0].url == (
            f"{BASE_URL}/applications/app-1/edge-cache/toggle-status"
        )
        assert api.captured[0].body == {"enabled": True}

    @pytest.mark.asyncio
    async def test_create_internal_connection(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.create_internal_connection(
            "app-1", {"target_id": "db-1", "target_type": "database"}
        )

        assert api.captured[0].method == "POST"
        assert api.captured[0].url == f"{BASE_URL}/applications/app-1/internal-connections"
        assert api.captured[0].body == {"target_id": "db-1", "target_type": "database"}


class TestDeploymentWrites:
    """Deployment and pipeline operations."""

    @pytest.mark.asyncio
    async def test_start_deployment(self, make_client) -> None:
        client, api = make_client(json_response({"deployment": {"id": "dep-1"}}))

        await client.start_deployment(
            StartDeploymentRequest(app_id="app-1", branch="main", is_restart=False)
        )

        assert api.captured[0].url == f"{BASE_URL}/applications/deployments"
        assert api.captured[0].body == {"app_id": "app-1", "branch": "main", "is_restart": False}

    @pytest.mark.asyncio
    async def test_create_preview_app(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.create_preview_app("pipe-1", {"branch": "feature/x"})

        assert api.captured[0].url == f"{BASE_URL}/pipelines/pipe-1/create-preview-app"
        assert api.captured[0].body == {"branch": "feature/x"}

    @pytest.mark.asyncio
    async def test_list_pipelines_paginated(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.list_pipelines(PaginationParams(limit=10, offset=0))

        assert api.captured[0].url == f"{BASE_URL}/pipelines{COMPANY_QUERY}&limit=10&offset=0"


class TestDatabaseWrites:
    """Database write operations."""

    @pytest.mark.asyncio
    async def test_create_database_injects_company(self, make_client) -> None:
        client, api = make_client(json_response({"database": {"id": "new-db"}}))

        await client.create_database(
            CreateDatabaseRequest(
                location="us-east1",
                resource_type="db-standard-1",
                display_name="Test DB",
                db_name="testdb",
                db_password="secret123",
                type="postgresql",
                version="16",
                db_user="admin",
            )
        )

        assert api.captured[0].method == "POST"
        assert api.captured[0].url == f"{BASE_URL}/databases"
        assert api.captured[0].body == {
            "location": "us-east1",
            "resource_type": "db-standard-1",
            "display_name": "Test DB",
            "db_name": "testdb",
            "db_password": "secret123",
            "type": "postgresql",
            "version": "16",
            "db_user": "admin",
            "company": COMPANY_ID,
        }

    @pytest.mark.asyncio
    async def test_create_redis_omits_db_user(self, make_client) -> None:
        client, api = make_client(json_response({"database": {"id": "redis-db"}}))

        await client.create_database(
            CreateDatabaseRequest(
                location="europe-west1",
                resource_type="db-standard-1",
                display_name="Redis Cache",
                db_name="cache",
                db_password="secret",
                type="redis",
                version="7",
            )
        )

        assert "db_user" not in api.captured[0].body
        assert api.captured[0].body["type"] == "redis"

    @pytest.mark.asyncio
    async def test_update_database(self, make_client) -> None:
        client, api = make_client(json_response({"database": {"id": "db-1"}}))

        await client.update_database(
            "db-1", {"display_name": "Updated DB", "resource_type": "db-standard-2"}
        )

        assert api.captured[0].method == "PUT"
        assert api.captured[0].url == f"{BASE_URL}/databases/db-1"
        assert api.captured[0].body == {
            "display_name": "Updated DB",
            "resource_type": "db-standard-2",
        }

    @pytest.mark.asyncio
    async def test_delete_database(self, make_client) -> None:
        client, api = make_client(httpx.Response(204))

        await client.delete_database("db-to-delete")

        assert api.captured[0].method == "DELETE"
        assert api.captured[0].url == f"{BASE_URL}/databases/db-to-delete"
        assert api.captured[0].body is None


class TestStaticSiteWrites:
    """Static site write operations."""

    @pytest.mark.asyncio
    async def test_update_static_site(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.update_static_site("site-1", {"display_name": "Docs"})

        assert api.captured[0].method == "PUT"
        assert api.captured[0].url == f"{BASE_URL}/static-sites/site-1"
        assert api.captured[0].body == {"display_name": "Docs"}

    @pytest.mark.asyncio
    async def test_delete_static_site(self, make_client) -> None:
        client, api = make_client(httpx.Response(204))

        await client.delete_static_site("site-1")

        assert api.captured[0].method == "DELETE"
        assert api.captured[0].url == f"{BASE_URL}/static-sites/site-1"

    @pytest.mark.asyncio
    async def test_deploy_static_site(self, make_client) -> None:
        client, api = make_client(json_response({}))

        await client.deploy_static_site(DeployStaticSiteRequest(static_site_id="site-1"))

        assert api.captured[0].url == f"{BASE_URL}/static-site-deployments"
        assert api.captured[0].body == {"static_site_id": "site-1"}
