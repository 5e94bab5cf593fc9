"""Tool catalog advertised to MCP clients.

Pure data: names, descriptions and JSON Schema input declarations. Argument
validation happens in the dispatcher against the models in
`sevalla_mcp.tools.arguments`.
"""

from typing import Any

from mcp.types import Tool

PAGINATION_PROPERTIES: dict[str, Any] = {
    "limit": {"type": "integer", "description": "Maximum items per response (1-100, default 10)"},
    "offset": {"type": "integer", "description": "Pagination offset (default 0)"},
}


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _string(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


TOOLS: list[Tool] = [
    # Company
    Tool(
        name="sevalla_get_company_users",
        description="List all users belonging to the company",
        inputSchema=_schema({}),
    ),
    Tool(
        name="sevalla_get_usage",
        description="Get PaaS usage data for the company within a billing period",
        inputSchema=_schema(
            {
                "period_offset": {
                    "type": "integer",
                    "description": "Billing period offset (0 = current, 1 = previous, etc.)",
                },
            }
        ),
    ),
    # Applications
    Tool(
        name="sevalla_list_applications",
        description="List all applications accessible in the company",
        inputSchema=_schema(PAGINATION_PROPERTIES),
    ),
    Tool(
        name="sevalla_get_application",
        description="Get detailed information about a specific application",
        inputSchema=_schema({"app_id": _string("Application UUID")}, ["app_id"]),
    ),
    Tool(
        name="sevalla_update_application",
        description="Update properties or settings of an existing application",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID"),
                "display_name": _string("New display name"),
            },
            ["app_id"],
        ),
    ),
    Tool(
        name="sevalla_delete_application",
        description="Permanently delete an application and all related resources",
        inputSchema=_schema({"app_id": _string("Application UUID")}, ["app_id"]),
    ),
    Tool(
        name="sevalla_promote_application",
        description="Promote an application in a pipeline to the next stage",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID to promote"),
                "pipeline_id": _string("Pipeline UUID"),
                "source_app_id": _string("Source application UUID (optional)"),
            },
            ["app_id", "pipeline_id"],
        ),
    ),
    # Processes
    Tool(
        name="sevalla_get_process",
        description="Get information about the running processes for a specific application",
        inputSchema=_schema({"process_id": _string("Process UUID")}, ["process_id"]),
    ),
    Tool(
        name="sevalla_update_process",
        description="Update or scale the running processes of an application",
        inputSchema=_schema(
            {
                "process_id": _string("Process UUID"),
                "replicas": {"type": "integer", "description": "Number of replicas"},
                "pod_size": _string("Pod size identifier"),
            },
            ["process_id"],
        ),
    ),
    # Networking
    Tool(
        name="sevalla_create_internal_connection",
        description="Create an internal connection between resources within the same region",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID"),
                "target_id": _string("Target resource UUID to connect to"),
                "target_type": _string("Target type (e.g., database, application)"),
            },
            ["app_id"],
        ),
    ),
    Tool(
        name="sevalla_toggle_cdn",
        description="Enable or disable CDN for an application",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID"),
                "enabled": {
                    "type": "boolean",
                    "description": "Whether to enable (true) or disable (false) CDN",
                },
            },
            ["app_id", "enabled"],
        ),
    ),
    Tool(
        name="sevalla_toggle_edge_cache",
        description="Toggle edge caching for improved application performance",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID"),
                "enabled": {
                    "type": "boolean",
                    "description": "Whether to enable (true) or disable (false) edge cache",
                },
            },
            ["app_id", "enabled"],
        ),
    ),
    Tool(
        name="sevalla_clear_cache",
        description="Clear the edge cache for an application to instantly update cached resources",
        inputSchema=_schema({"app_id": _string("Application UUID")}, ["app_id"]),
    ),
    # Deployments
    Tool(
        name="sevalla_get_deployment",
        description="Get deployment details for a specific application deployment",
        inputSchema=_schema({"deployment_id": _string("Deployment UUID")}, ["deployment_id"]),
    ),
    Tool(
        name="sevalla_start_deployment",
        description="Start a new deployment for an application",
        inputSchema=_schema(
            {
                "app_id": _string("Application UUID to deploy"),
                "branch": _string("Git branch to deploy"),
                "docker_image": _string("Docker image to deploy"),
                "is_restart": {
                    "type": "boolean",
                    "description": "Whether this is a restart deployment (default false)",
                },
            },
            ["app_id"],
        ),
    ),
    # Pipelines
    Tool(
        name="sevalla_get_pipelines",
        description="List all pipeline configurations and workflows",
        inputSchema=_schema(PAGINATION_PROPERTIES),
    ),
    Tool(
        name="sevalla_create_preview_app",
        description="Create a preview application in a pipeline from a branch",
        inputSchema=_schema(
            {
                "pipeline_id": _string("Pipeline UUID"),
                "branch": _string("Git branch for the preview app"),
            },
            ["pipeline_id", "branch"],
        ),
    ),
    # Databases
    Tool(
        name="sevalla_list_databases",
        description="List all databases available to the company",
        inputSchema=_schema(PAGINATION_PROPERTIES),
    ),
    Tool(
        name="sevalla_get_database",
        description="Get details for a specific database including configuration and status",
        inputSchema=_schema({"database_id": _string("Database UUID")}, ["database_id"]),
    ),
    Tool(
        name="sevalla_create_database",
        description="Create a new database with the specified configuration",
        inputSchema=_schema(
            {
                "location": _string("Cluster location identifier (e.g., europe-west1)"),
                "resource_type": _string("Resource type name (e.g., db-standard-1)"),
                "display_name": _string("Display name (2-64 characters)"),
                "db_name": _string("Database name (2-100 characters)"),
                "db_password": _string("Database password (4-100 characters)"),
                "type": {
                    "type": "string",
                    "description": "Database engine type",
                    "enum": ["postgresql", "mariadb", "mysql", "mongodb", "redis", "valkey"],
                },
                "version": _string('Database engine version (e.g., "16")'),
                "db_user": _string("Database user (required for non-Redis/Valkey)"),
            },
            ["location", "resource_type", "display_name", "db_name", "db_password", "type", "version"],
        ),
    ),
    Tool(
        name="sevalla_update_database",
        description="Update settings or metadata for an existing database",
        inputSchema=_schema(
            {
                "database_id": _string("Database UUID"),
                "resource_type": _string("New resource type"),
                "display_name": _string("New display name"),
            },
            ["database_id"],
        ),
    ),
    Tool(
        name="sevalla_delete_database",
        description="Permanently delete a database and all its associated data",
        inputSchema=_schema({"database_id": _string("Database UUID")}, ["database_id"]),
    ),
    # Static sites
    Tool(
        name="sevalla_list_static_sites",
        description="List all static sites accessible in the company",
        inputSchema=_schema(PAGINATION_PROPERTIES),
    ),
    Tool(
        name="sevalla_get_static_site",
        description="Get detailed information about a specific static site",
        inputSchema=_schema({"static_site_id": _string("Static site UUID")}, ["static_site_id"]),
    ),
    Tool(
        name="sevalla_update_static_site",
        description="Update properties or settings of an existing static site",
        inputSchema=_schema(
            {
                "static_site_id": _string("Static site UUID"),
                "display_name": _string("New display name"),
            },
            ["static_site_id"],
        ),
    ),
    Tool(
        name="sevalla_delete_static_site",
        description="Permanently delete a static site and all related resources",
        inputSchema=_schema({"static_site_id": _string("Static site UUID")}, ["static_site_id"]),
    ),
    Tool(
        name="sevalla_get_static_site_deployment",
        description="Get deployment details for a specific static site deployment",
        inputSchema=_schema({"deployment_id": _string("Deployment UUID")}, ["deployment_id"]),
    ),
    Tool(
        name="sevalla_deploy_static_site",
        description="Manually or programmatically deploy a static site",
        inputSchema=_schema(
            {
                "static_site_id": _string("Static site UUID"),
                "branch": _string("Git branch to deploy"),
            },
            ["static_site_id"],
        ),
    ),
]

TOOL_NAMES: frozenset[str] = frozenset(tool.name for tool in TOOLS)


def list_tools() -> list[Tool]:
    """Return the advertised tools in catalog order."""
    return list(TOOLS)
