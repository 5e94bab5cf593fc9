"""Request models for Sevalla API calls.

Bodies are serialized with `exclude_none=True`, so optional fields the
caller did not set never reach the API. Update and connection models
accept extra fields: the API takes settings this adapter does not enumerate.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DatabaseType = Literal["postgresql", "mariadb", "mysql", "mongodb", "redis", "valkey"]


class PaginationParams(BaseModel):
    """Pagination for list endpoints."""

    limit: int | None = Field(default=None, ge=1, le=100, description="Maximum items per response")
    offset: int | None = Field(default=None, ge=0, description="Pagination offset")


# Applications
class UpdateApplicationRequest(BaseModel):
    """Request model for updating an application."""

    model_config = ConfigDict(extra="allow")

    display_name: str | None = Field(default=None)


class PromoteApplicationRequest(BaseModel):
    """Request model for promoting an application along a pipeline."""

    app_id: str = Field(..., min_length=1)
    pipeline_id: str = Field(..., min_length=1)
    source_app_id: str | None = Field(default=None)


# Processes
class UpdateProcessRequest(BaseModel):
    """Request model for scaling or updating a process."""

    model_config = ConfigDict(extra="allow")

    replicas: int | None = Field(default=None, ge=0)
    pod_size: str | None = Field(default=None)


# Networking
class CreateInternalConnectionRequest(BaseModel):
    """Request model for an internal connection between resources."""

    model_config = ConfigDict(extra="allow")

    target_id: str | None = Field(default=None)
    target_type: str | None = Field(default=None)


# Deployments
class StartDeploymentRequest(BaseModel):
    """Request model for starting an application deployment."""

    app_id: str = Field(..., min_length=1)
    branch: str | None = Field(default=None)
    docker_image: str | None = Field(default=None)
    is_restart: bool | None = Field(default=None)


# Pipelines
class CreatePreviewAppRequest(BaseModel):
    """Request model for creating a preview app from a branch."""

    model_config = ConfigDict(extra="allow")

    branch: str = Field(..., min_length=1)


# Databases
class CreateDatabaseRequest(BaseModel):
    """Request model for creating a database.

    The company is added by the client, not by the caller.
    """

    location: str = Field(..., min_length=1)
    resource_type: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=2, max_length=64)
    db_name: str = Field(..., min_length=2, max_length=100)
    db_password: str = Field(..., min_length=4, max_length=100)
    type: DatabaseType
    version: str = Field(..., min_length=1)
    db_user: str | None = Field(default=None)


class UpdateDatabaseRequest(BaseModel):
    """Request model for updating a database."""

    model_config = ConfigDict(extra="allow")

    resource_type: str | None = Field(default=None)
    display_name: str | None = Field(default=None)


# Static sites
class UpdateStaticSiteRequest(BaseModel):
    """Request model for updating a static site."""

    model_config = ConfigDict(extra="allow")

    display_name: str | None = Field(default=None)


class DeployStaticSiteRequest(BaseModel):
    """Request model for deploying a static site."""

    static_site_id: str = Field(..., min_length=1)
    branch: str | None = Field(default=None)
