"""Assistant client configuration with environment variable loading.

Pydantic-based configuration for the connection to the remote
event sponsorship assistant.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://adk-backend-service-766291037876.us-central1.run.app/"


class AssistantConfig(BaseModel):
    """Configuration for the remote assistant endpoint.

    Attributes:
        base_url: Root URL of the assistant service; /run is resolved against it.
        timeout: Request timeout in seconds (None disables timeouts).
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("ASSISTANT_BASE_URL") or DEFAULT_BASE_URL,
        validate_default=True,
        description="Root URL of the assistant service",
    )
    timeout: float | None = Field(
        default_factory=lambda: os.getenv("ASSISTANT_TIMEOUT") or None,
        gt=0,
        validate_default=True,
        description="Request timeout in seconds, None for no timeout",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL ending with a slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "Assistant base URL must start with http:// or https://. "
                "Set ASSISTANT_BASE_URL in .env"
            )
        return v if v.endswith("/") else f"{v}/"


def get_assistant_config() -> AssistantConfig:
    """Create assistant configuration from environment.

    Returns:
        Configured AssistantConfig instance.

    Raises:
        ValidationError: If the environment holds an invalid URL or timeout.
    """
    return AssistantConfig()
