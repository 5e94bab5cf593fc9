"""Unit tests for tool argument and request models."""

import pytest
from pydantic import ValidationError

from sevalla_mcp.models import CreateDatabaseRequest, PaginationParams
from sevalla_mcp.tools.arguments import (
    CreatePreviewAppArgs,
    ToggleArgs,
    UpdateApplicationArgs,
    body_of,
)


class TestBodyOf:
    """Tests for splitting path identifiers from bodies."""

    def test_excludes_path_field_and_unset(self) -> None:
        args = UpdateApplicationArgs(app_id="app-1")
        assert body_of(args, "app_id") == {}

    def test_keeps_extra_fields(self) -> None:
        args = UpdateApplicationArgs.model_validate(
            {"app_id": "app-1", "display_name": "New", "build_type": "dockerfile"}
        )
        assert body_of(args, "app_id") == {"display_name": "New", "build_type": "dockerfile"}

    def test_preview_app(self) -> None:
        args = CreatePreviewAppArgs(pipeline_id="p", branch="main")
        assert body_of(args, "pipeline_id") == {"branch": "main"}


class TestValidation:
    """Argument validation rules."""

    def test_toggle_requires_enabled(self) -> None:
        with pytest.raises(ValidationError):
            ToggleArgs.model_validate({"app_id": "app-1"})

    def test_pagination_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PaginationParams(limit=0)
        with pytest.raises(ValidationError):
            PaginationParams(offset=-1)

    def test_pagination_accepts_integral_numbers(self) -> None:
        assert PaginationParams.model_validate({"limit": 10.0}).limit == 10

    def test_database_password_length(self) -> None:
        with pytest.raises(ValidationError):
            CreateDatabaseRequest(
                location="us-east1",
                resource_type="db-standard-1",
                display_name="DB",
                db_name="db",
                db_password="abc",
                type="mysql",
                version="8",
            )
