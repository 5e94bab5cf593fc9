"""Test factories for fake API responses."""

from tests.factories.api import (
    API_KEY,
    BASE_URL,
    COMPANY_ID,
    CapturedRequest,
    FakeAPI,
    json_response,
)

__all__ = [
    "API_KEY",
    "BASE_URL",
    "COMPANY_ID",
    "CapturedRequest",
    "FakeAPI",
    "json_response",
]
