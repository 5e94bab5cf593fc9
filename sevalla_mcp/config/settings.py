"""Root settings model for the Sevalla MCP server."""

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sevalla_mcp.config.models import DEFAULT_BASE_URL, ClientConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class ConfigurationError(Exception):
    """Raised when required startup configuration is missing or invalid."""


class Settings(BaseSettings):
    """Process configuration.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. .env file in the working directory
    3. SEVALLA_* environment variables
    """

    model_config = SettingsConfigDict(
        env_prefix="SEVALLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    api_key: SecretStr | None = Field(default=None, description="Sevalla API key")
    company_id: str | None = Field(default=None, description="Sevalla company ID")

    # HTTP client
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Sevalla API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_attempts: int = Field(default=3, ge=1, description="Attempts per API call")

    # Logging
    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="console", description="Log renderer")

    @field_validator("api_key", "company_id", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def client_config(self) -> ClientConfig:
        """Build the client configuration, failing if credentials are absent.

        Raises:
            ConfigurationError: If SEVALLA_API_KEY or SEVALLA_COMPANY_ID is unset
        """
        if self.api_key is None or not self.api_key.get_secret_value():
            raise ConfigurationError("Missing required environment variable: SEVALLA_API_KEY")
        if not self.company_id:
            raise ConfigurationError("Missing required environment variable: SEVALLA_COMPANY_ID")

        return ClientConfig(
            api_key=self.api_key,
            company_id=self.company_id,
            base_url=self.base_url,
            timeout=self.timeout,
            max_attempts=self.max_attempts,
        )
