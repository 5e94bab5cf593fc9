"""Typed request models for the Sevalla API."""

from sevalla_mcp.models.requests import (
    CreateDatabaseRequest,
    CreateInternalConnectionRequest,
    CreatePreviewAppRequest,
    DatabaseType,
    DeployStaticSiteRequest,
    PaginationParams,
    PromoteApplicationRequest,
    StartDeploymentRequest,
    UpdateApplicationRequest,
    UpdateDatabaseRequest,
    UpdateProcessRequest,
    UpdateStaticSiteRequest,
)

__all__ = [
    "CreateDatabaseRequest",
    "CreateInternalConnectionRequest",
    "CreatePreviewAppRequest",
    "DatabaseType",
    "DeployStaticSiteRequest",
    "PaginationParams",
    "PromoteApplicationRequest",
    "StartDeploymentRequest",
    "UpdateApplicationRequest",
    "UpdateDatabaseRequest",
    "UpdateProcessRequest",
    "UpdateStaticSiteRequest",
]
