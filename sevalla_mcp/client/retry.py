"""Retry policy and response classification for the Sevalla client.

Each attempt's response is sorted into an Outcome before the client acts on
it, so the loop in SevallaClient.request reads as a dispatch over a closed
set of cases:

- SUCCESS / NO_CONTENT: return
- RATE_LIMITED: wait (Retry-After or positional delay), try again
- AUTH_FAILED: raise immediately
- API_ERROR: raise into the generic retry path

Delays are in seconds. Attempt numbers are 0-indexed and the first attempt
counts toward the ceiling.
"""

from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """Classification of a single HTTP response."""

    SUCCESS = "success"
    NO_CONTENT = "no_content"
    RATE_LIMITED = "rate_limited"
    AUTH_FAILED = "auth_failed"
    API_ERROR = "api_error"


def classify(status_code: int) -> Outcome:
    """Map an HTTP status code to the action the retry loop takes."""
    if status_code == 429:
        return Outcome.RATE_LIMITED
    if status_code in (401, 403):
        return Outcome.AUTH_FAILED
    if status_code == 204:
        return Outcome.NO_CONTENT
    if 200 <= status_code < 300:
        return Outcome.SUCCESS
    return Outcome.API_ERROR


def parse_retry_after(value: str | None) -> float | None:
    """Parse a Retry-After header given in whole seconds.

    Returns None when the header is absent or is not an integer (HTTP-date
    forms included), so the caller falls back to the positional delay.
    """
    if value is None:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        return None
    return float(max(seconds, 0))


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounded linear backoff with a separate rate-limit schedule.

    Attributes:
        max_attempts: Attempt ceiling per logical call (default: 3)
        rate_limit_step: Seconds per attempt when rate limited without
            Retry-After (default: 2.0)
        failure_step: Seconds per attempt after a retryable failure
            (default: 1.0)
    """

    max_attempts: int = 3
    rate_limit_step: float = 2.0
    failure_step: float = 1.0

    def is_last(self, attempt: int) -> bool:
        return attempt >= self.max_attempts - 1

    def rate_limit_delay(self, attempt: int, retry_after: str | None = None) -> float:
        """Delay before the next attempt after a 429."""
        server_delay = parse_retry_after(retry_after)
        if server_delay is not None:
            return server_delay
        return (attempt + 1) * self.rate_limit_step

    def failure_delay(self, attempt: int) -> float:
        """Delay before the next attempt after a retryable error."""
        return (attempt + 1) * self.failure_step
