"""
Client Options - Device identification headers and connection settings.

Options are loaded from REVOLUT_* environment variables or a .env file:

    REVOLUT_CLIENT_VERSION=5.12
    REVOLUT_API_VERSION=1
    REVOLUT_DEVICE_ID=...
    REVOLUT_DEVICE_MODEL=iPhone8,1
"""

from typing import Dict, Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from revolut_customer.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.revolut.com/"
DEFAULT_USER_AGENT = "Revolut/com.revolut.revolut (iPhone; iOS 11.1)"


class Options(BaseSettings):
    """
    Options for the client configuration.

    The four device fields are required; the API rejects requests that
    do not identify the app and device.
    """

    model_config = SettingsConfigDict(
        env_prefix="REVOLUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_version: str = Field(description="Version of the client app")
    api_version: str = Field(description="Version of the API")
    device_id: str = Field(description="Identification of the device")
    device_model: str = Field(description="Model of the device")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User agent of the device")

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the API")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls, **overrides: Any) -> "Options":
        """
        Build options from the environment, with explicit overrides.

        Raises:
            ConfigurationError: If a required option is missing or invalid
        """
        try:
            return cls(**overrides)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in exc.errors()
            )
            raise ConfigurationError(f"invalid client options: {fields}") from exc

    def headers(self) -> Dict[str, str]:
        """Headers sent with every request. Empty values are left out."""
        candidates = {
            "X-Client-Version": self.client_version,
            "X-Api-Version": self.api_version,
            "X-Device-Id": self.device_id,
            "X-Device-Model": self.device_model,
            "User-Agent": self.user_agent,
        }
        return {name: value for name, value in candidates.items() if value}
