"""MCP server for the Sevalla cloud hosting API."""

__version__ = "1.0.0"
