"""Exception hierarchy for Sevalla API calls.

The retry loop keys its decisions off these types: AuthenticationError is
final on sight, APIError and TransportError are retried until the attempt
ceiling, RetriesExhaustedError only appears when the loop runs out while
being rate limited.
"""

from typing import Any


class SevallaClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class AuthenticationError(SevallaClientError):
    """Raised on 401/403. Never retried."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Authentication failed ({status_code}): {body}",
            status_code=status_code,
            body=body,
        )


class APIError(SevallaClientError):
    """Raised on any other non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API error {status_code}: {body}",
            status_code=status_code,
            body=body,
        )


class TransportError(SevallaClientError):
    """Raised when no usable response was obtained.

    Covers connection failures, timeouts and undecodable response bodies.
    The message is the underlying exception's message, unchanged.
    """


class RetriesExhaustedError(SevallaClientError):
    """Raised when every attempt was consumed without a final outcome."""

    def __init__(self, attempts: int):
        super().__init__(f"Request failed after {attempts} retries")
        self.attempts = attempts
