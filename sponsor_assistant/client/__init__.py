"""Connection to the remote event sponsorship assistant.

Responsibilities:
    - Endpoint configuration loaded from the environment
    - Building the fixed-identity /run request
    - Mapping HTTP outcomes onto AssistantError subclasses

Holds no conversation state. The state manager decides what to show.
"""

from sponsor_assistant.client.assistant_client import (
    AssistantAPIError,
    AssistantClient,
    AssistantEndpoint,
    AssistantError,
    AssistantTransportError,
    close_assistant_client,
    get_assistant_client,
)
from sponsor_assistant.client.config import AssistantConfig, get_assistant_config

__all__ = [
    "AssistantAPIError",
    "AssistantClient",
    "AssistantConfig",
    "AssistantEndpoint",
    "AssistantError",
    "AssistantTransportError",
    "close_assistant_client",
    "get_assistant_client",
    "get_assistant_config",
]
