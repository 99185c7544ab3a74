"""Application settings.

Loaded from environment variables (and an optional ``.env`` file). CLI flags
are passed in as init kwargs, which take precedence over the environment.
"""

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from amplitude_mcp.core.config.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_INGESTION_ENDPOINT,
    DEFAULT_SERVER_NAME,
    DEFAULT_SERVER_VERSION,
)

ENV_FILE = Path.cwd() / ".env"


class Settings(BaseSettings):
    """Process configuration for the MCP server.

    Env vars:
        AMPLITUDE_API_KEY=...        (required)
        DEBUG=true
        AMPLITUDE_ENDPOINT=https://api2.amplitude.com/2/httpapi
        HTTP_TIMEOUT=10
    """

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    AMPLITUDE_API_KEY: SecretStr = Field(..., description="Amplitude project API key")
    DEBUG: bool = Field(False, description="Write verbose diagnostics to stderr")

    AMPLITUDE_ENDPOINT: str = Field(
        DEFAULT_INGESTION_ENDPOINT, description="HTTP V2 ingestion endpoint"
    )
    HTTP_TIMEOUT: float = Field(
        DEFAULT_HTTP_TIMEOUT, gt=0, description="Seconds to wait for the provider"
    )

    SERVER_NAME: str = DEFAULT_SERVER_NAME
    SERVER_VERSION: str = DEFAULT_SERVER_VERSION

    @field_validator("AMPLITUDE_API_KEY")
    @classmethod
    def _api_key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("AMPLITUDE_API_KEY must not be empty")
        return value

    @property
    def api_key_hint(self) -> str:
        """First characters of the API key, safe to log."""
        return f"{self.AMPLITUDE_API_KEY.get_secret_value()[:3]}..."
