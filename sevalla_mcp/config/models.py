"""Configuration models handed to runtime components."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_BASE_URL = "https://api.sevalla.com/v2"


class ClientConfig(BaseModel):
    """Immutable connection settings for one SevallaClient.

    Built once at startup and shared read-only; the client never looks at
    the environment itself.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(..., description="Bearer credential")
    company_id: str = Field(..., min_length=1, description="Tenant (company) identifier")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API origin and version prefix")
    timeout: float = Field(default=30.0, gt=0, description="Per-attempt timeout in seconds")
    max_attempts: int = Field(default=3, ge=1, description="Attempt ceiling per logical call")

    @field_validator("api_key", mode="before")
    @classmethod
    def _strip_key(cls, value: object) -> object:
        if isinstance(value, SecretStr):
            return SecretStr(value.get_secret_value().strip())
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("company_id", mode="before")
    @classmethod
    def _strip_company(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
