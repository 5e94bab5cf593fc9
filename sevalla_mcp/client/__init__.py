"""Sevalla API client.

Usage:
    from sevalla_mcp.client import SevallaClient
    from sevalla_mcp.config import get_settings

    async with SevallaClient(get_settings().client_config()) as client:
        users = await client.get_company_users()
"""

from sevalla_mcp.client.client import SevallaClient
from sevalla_mcp.client.errors import (
    APIError,
    AuthenticationError,
    RetriesExhaustedError,
    SevallaClientError,
    TransportError,
)
from sevalla_mcp.client.query import build_query
from sevalla_mcp.client.retry import Outcome, RetryPolicy

__all__ = [
    "APIError",
    "AuthenticationError",
    "Outcome",
    "RetriesExhaustedError",
    "RetryPolicy",
    "SevallaClient",
    "SevallaClientError",
    "TransportError",
    "build_query",
]
