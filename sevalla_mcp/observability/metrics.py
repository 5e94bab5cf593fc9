"""Prometheus metrics for the Sevalla adapter.

Counters only; the process is a stdio MCP server and does not expose an
HTTP scrape endpoint itself. Embedders can register the default registry
with their own exporter.
"""

from prometheus_client import Counter

# Outbound API metrics
API_REQUEST_COUNT = Counter(
    "sevalla_api_requests_total",
    "HTTP responses received from the Sevalla API",
    labelnames=["method", "status"],
)

API_RETRY_COUNT = Counter(
    "sevalla_api_retries_total",
    "Request attempts that were retried",
    labelnames=["reason"],
)

# Tool metrics
TOOL_CALL_COUNT = Counter(
    "sevalla_tool_calls_total",
    "Tool invocations handled by the dispatcher",
    labelnames=["tool", "status"],
)
