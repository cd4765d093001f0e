"""
Configuration for the Pxshot client.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.pxshot.com"
DEFAULT_TIMEOUT = 60.0


class ClientConfig(BaseModel):
    """Client configuration, fixed once the client is built."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="API key sent as a Bearer token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    user_agent: Optional[str] = Field(default=None, description="Custom User-Agent")


class PxshotSettings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    PXSHOT_API_KEY: str = Field(default="", description="Pxshot API key")
    PXSHOT_BASE_URL: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    PXSHOT_TIMEOUT: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")
    PXSHOT_USER_AGENT: Optional[str] = Field(default=None, description="Custom User-Agent")

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Log level for configure_logging()")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            api_key=self.PXSHOT_API_KEY,
            base_url=self.PXSHOT_BASE_URL,
            timeout=self.PXSHOT_TIMEOUT,
            user_agent=self.PXSHOT_USER_AGENT,
        )
