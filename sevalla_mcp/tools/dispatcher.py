"""Tool dispatcher: maps tool names to client calls and wraps the outcome.

Every call returns a CallToolResult with a single text item holding either
the pretty-printed API response or `{"error": true, "message": ...}`.
Nothing raised below this layer reaches the MCP transport.
"""

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ValidationError

from sevalla_mcp.client import SevallaClient
from sevalla_mcp.models.requests import (
    CreateDatabaseRequest,
    DeployStaticSiteRequest,
    PromoteApplicationRequest,
    StartDeploymentRequest,
)
from sevalla_mcp.observability.logging import get_logger
from sevalla_mcp.observability.metrics import TOOL_CALL_COUNT
from sevalla_mcp.tools.arguments import (
    AppArgs,
    CreateInternalConnectionArgs,
    CreatePreviewAppArgs,
    DatabaseArgs,
    DeploymentArgs,
    NoArgs,
    PaginationArgs,
    ProcessArgs,
    StaticSiteArgs,
    ToggleArgs,
    UpdateApplicationArgs,
    UpdateDatabaseArgs,
    UpdateProcessArgs,
    UpdateStaticSiteArgs,
    UsageArgs,
    body_of,
)
from sevalla_mcp.tools.errors import InvalidArgumentsError, UnknownToolError

logger = get_logger(__name__)

HandlerFn = Callable[[SevallaClient, Any], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class ToolHandler:
    """Binding of one tool name to its argument model and client call.

    Attributes:
        name: Tool name as advertised in the catalog
        args_model: Model the argument bag is validated into
        call: Coroutine invoking the client
        acknowledgement: Fixed message returned instead of the API response,
            for calls whose response carries nothing useful
    """

    name: str
    args_model: type[BaseModel]
    call: HandlerFn
    acknowledgement: str | None = None

    def parse(self, arguments: dict[str, Any] | None) -> BaseModel:
        try:
            return self.args_model.model_validate(arguments or {})
        except ValidationError as exc:
            raise InvalidArgumentsError(self.name, exc) from exc


HANDLERS: dict[str, ToolHandler] = {}


def tool(
    name: str,
    args_model: type[BaseModel],
    acknowledgement: str | None = None,
) -> Callable[[HandlerFn], HandlerFn]:
    """Register a handler coroutine under a tool name."""

    def decorator(func: HandlerFn) -> HandlerFn:
        HANDLERS[name] = ToolHandler(name, args_model, func, acknowledgement)
        return func

    return decorator


# Company
@tool("sevalla_get_company_users", NoArgs)
async def _get_company_users(client: SevallaClient, _args: NoArgs) -> Any:
    return await client.get_company_users()


@tool("sevalla_get_usage", UsageArgs)
async def _get_usage(client: SevallaClient, args: UsageArgs) -> Any:
    return await client.get_usage(args.period_offset)


# Applications
@tool("sevalla_list_applications", PaginationArgs)
async def _list_applications(client: SevallaClient, args: PaginationArgs) -> Any:
    return await client.list_applications(args)


@tool("sevalla_get_application", AppArgs)
async def _get_application(client: SevallaClient, args: AppArgs) -> Any:
    return await client.get_application(args.app_id)


@tool("sevalla_update_application", UpdateApplicationArgs)
async def _update_application(client: SevallaClient, args: UpdateApplicationArgs) -> Any:
    return await client.update_application(args.app_id, body_of(args, "app_id"))


@tool("sevalla_delete_application", AppArgs, acknowledgement="Application deleted")
async def _delete_application(client: SevallaClient, args: AppArgs) -> None:
    await client.delete_application(args.app_id)


@tool("sevalla_promote_application", PromoteApplicationRequest)
async def _promote_application(client: SevallaClient, args: PromoteApplicationRequest) -> Any:
    return await client.promote_application(args)


# Processes
@tool("sevalla_get_process", ProcessArgs)
async def _get_process(client: SevallaClient, args: ProcessArgs) -> Any:
    return await client.get_process(args.process_id)


@tool("sevalla_update_process", UpdateProcessArgs)
async def _update_process(client: SevallaClient, args: UpdateProcessArgs) -> Any:
    return await client.update_process(args.process_id, body_of(args, "process_id"))


# Networking
@tool("sevalla_create_internal_connection", CreateInternalConnectionArgs)
async def _create_internal_connection(
    client: SevallaClient, args: CreateInternalConnectionArgs
) -> Any:
    return await client.create_internal_connection(args.app_id, body_of(args, "app_id"))


@tool("sevalla_toggle_cdn", ToggleArgs)
async def _toggle_cdn(client: SevallaClient, args: ToggleArgs) -> Any:
    return await client.toggle_cdn(args.app_id, args.enabled)


@tool("sevalla_toggle_edge_cache", ToggleArgs)
async def _toggle_edge_cache(client: SevallaClient, args: ToggleArgs) -> Any:
    return await client.toggle_edge_cache(args.app_id, args.enabled)


@tool("sevalla_clear_cache", AppArgs)
async def _clear_cache(client: SevallaClient, args: AppArgs) -> Any:
    return await client.clear_cache(args.app_id)


# Deployments
@tool("sevalla_get_deployment", DeploymentArgs)
async def _get_deployment(client: SevallaClient, args: DeploymentArgs) -> Any:
    return await client.get_deployment(args.deployment_id)


@tool("sevalla_start_deployment", StartDeploymentRequest)
async def _start_deployment(client: SevallaClient, args: StartDeploymentRequest) -> Any:
    return await client.start_deployment(args)


# Pipelines
@tool("sevalla_get_pipelines", PaginationArgs)
async def _get_pipelines(client: SevallaClient, args: PaginationArgs) -> Any:
    return await client.list_pipelines(args)


@tool("sevalla_create_preview_app", CreatePreviewAppArgs)
async def _create_preview_app(client: SevallaClient, args: CreatePreviewAppArgs) -> Any:
    return await client.create_preview_app(args.pipeline_id, body_of(args, "pipeline_id"))


# Databases
@tool("sevalla_list_databases", PaginationArgs)
async def _list_databases(client: SevallaClient, args: PaginationArgs) -> Any:
    return await client.list_databases(args)


@tool("sevalla_get_database", DatabaseArgs)
async def _get_database(client: SevallaClient, args: DatabaseArgs) -> Any:
    return await client.get_database(args.database_id)


@tool("sevalla_create_database", CreateDatabaseRequest)
async def _create_database(client: SevallaClient, args: CreateDatabaseRequest) -> Any:
    return await client.create_database(args)


@tool("sevalla_update_database", UpdateDatabaseArgs)
async def _update_database(client: SevallaClient, args: UpdateDatabaseArgs) -> Any:
    return await client.update_database(args.database_id, body_of(args, "database_id"))


@tool("sevalla_delete_database", DatabaseArgs, acknowledgement="Database deleted")
async def _delete_database(client: SevallaClient, args: DatabaseArgs) -> None:
    await client.delete_database(args.database_id)


# Static sites
@tool("sevalla_list_static_sites", PaginationArgs)
async def _list_static_sites(client: SevallaClient, args: PaginationArgs) -> Any:
    return await client.list_static_sites(args)


@tool("sevalla_get_static_site", StaticSiteArgs)
async def _get_static_site(client: SevallaClient, args: StaticSiteArgs) -> Any:
    return await client.get_static_site(args.static_site_id)


@tool("sevalla_update_static_site", UpdateStaticSiteArgs)
async def _update_static_site(client: SevallaClient, args: UpdateStaticSiteArgs) -> Any:
    return await client.update_static_site(args.static_site_id, body_of(args, "static_site_id"))


@tool("sevalla_delete_static_site", StaticSiteArgs, acknowledgement="Static site deleted")
async def _delete_static_site(client: SevallaClient, args: StaticSiteArgs) -> None:
    await client.delete_static_site(args.static_site_id)


@tool("sevalla_get_static_site_deployment", DeploymentArgs)
async def _get_static_site_deployment(client: SevallaClient, args: DeploymentArgs) -> Any:
    return await client.get_static_site_deployment(args.deployment_id)


@tool("sevalla_deploy_static_site", DeployStaticSiteRequest)
async def _deploy_static_site(client: SevallaClient, args: DeployStaticSiteRequest) -> Any:
    return await client.deploy_static_site(args)


def _text_result(data: Any) -> CallToolResult:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)])


class ToolDispatcher:
    """Resolves tool calls against a SevallaClient.

    Usage:
        dispatcher = ToolDispatcher(client)
        result = await dispatcher.dispatch("sevalla_get_application", {"app_id": "..."})
    """

    def __init__(self, client: SevallaClient):
        self._client = client

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Run one tool call and wrap its outcome; never raises."""
        log = logger.bind(tool=name)
        handler = HANDLERS.get(name)
        try:
            if handler is None:
                raise UnknownToolError(name)
            args = handler.parse(arguments)
            log.debug("tool_call_started")
            data = await handler.call(self._client, args)
        except Exception as exc:
            message = getattr(exc, "message", None) or str(exc)
            log.warning("tool_call_failed", error=message, error_type=type(exc).__name__)
            TOOL_CALL_COUNT.labels(
                tool=name if handler else "unknown", status="error"
            ).inc()
            return _text_result({"error": True, "message": message})

        TOOL_CALL_COUNT.labels(tool=name, status="ok").inc()
        if handler.acknowledgement:
            return _text_result({"success": True, "message": handler.acknowledgement})
        return _text_result(data)
