"""Argument models for tool calls.

Each tool's argument bag is validated once into one of these models before
the client is touched. Models that combine a path identifier with a body
extend the body model and add the identifier; `body_of` splits them back.
"""

from pydantic import BaseModel, Field

from sevalla_mcp.models.requests import (
    CreateInternalConnectionRequest,
    CreatePreviewAppRequest,
    PaginationParams,
    UpdateApplicationRequest,
    UpdateDatabaseRequest,
    UpdateProcessRequest,
    UpdateStaticSiteRequest,
)


class NoArgs(BaseModel):
    """Tools that take no arguments."""


class UsageArgs(BaseModel):
    period_offset: int | None = Field(default=None, ge=0)


class PaginationArgs(PaginationParams):
    pass


class AppArgs(BaseModel):
    app_id: str = Field(..., min_length=1)


class ToggleArgs(AppArgs):
    enabled: bool


class ProcessArgs(BaseModel):
    process_id: str = Field(..., min_length=1)


class DeploymentArgs(BaseModel):
    deployment_id: str = Field(..., min_length=1)


class DatabaseArgs(BaseModel):
    database_id: str = Field(..., min_length=1)


class StaticSiteArgs(BaseModel):
    static_site_id: str = Field(..., min_length=1)


class UpdateApplicationArgs(UpdateApplicationRequest):
    app_id: str = Field(..., min_length=1)


class UpdateProcessArgs(UpdateProcessRequest):
    process_id: str = Field(..., min_length=1)


class CreateInternalConnectionArgs(CreateInternalConnectionRequest):
    app_id: str = Field(..., min_length=1)


class CreatePreviewAppArgs(CreatePreviewAppRequest):
    pipeline_id: str = Field(..., min_length=1)


class UpdateDatabaseArgs(UpdateDatabaseRequest):
    database_id: str = Field(..., min_length=1)


class UpdateStaticSiteArgs(UpdateStaticSiteRequest):
    static_site_id: str = Field(..., min_length=1)


def body_of(args: BaseModel, *path_fields: str) -> dict:
    """Dump an argument model without its path identifiers or unset fields."""
    return args.model_dump(exclude=set(path_fields), exclude_none=True)
