"""Errors raised while resolving a tool call, before any HTTP request."""

from pydantic import ValidationError


class ToolError(Exception):
    """Base exception for dispatcher errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownToolError(ToolError):
    """Raised when a tool name has no handler."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(ToolError):
    """Raised when a tool's arguments fail validation."""

    def __init__(self, name: str, error: ValidationError) -> None:
        details = "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or 'arguments'}: {item['msg']}"
            for item in error.errors()
        )
        super().__init__(f"Invalid arguments for {name}: {details}")
        self.name = name
