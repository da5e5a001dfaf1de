"""HTTP client for the remote event sponsorship assistant.

Sends one user turn to POST /run and returns the parsed response events.
Failures are raised as AssistantError subclasses so callers can tell an
API-level rejection apart from a transport problem.
"""

import logging
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from sponsor_assistant.client.config import AssistantConfig, get_assistant_config
from sponsor_assistant.models.schemas import RunEvent, RunRequest

logger = logging.getLogger(__name__)

RUN_PATH = "run"

_events_adapter = TypeAdapter(list[RunEvent] | None)


class AssistantError(Exception):
    """Base class for failures talking to the assistant."""


class AssistantAPIError(AssistantError):
    """Raised when the assistant answers with a non-success status."""

    def __init__(self, status_code: int, status_message: str) -> None:
        super().__init__(f"{status_code} - {status_message}")
        self.status_code = status_code
        self.status_message = status_message


class AssistantTransportError(AssistantError):
    """Raised when no usable response arrived (connection, timeout, bad payload)."""


class AssistantEndpoint(Protocol):
    """Anything that can exchange a user turn for response events."""

    async def run(self, text: str) -> list[RunEvent]: ...


def parse_run_response(body: bytes) -> list[RunEvent]:
    """Parse a /run response body into events.

    Args:
        body: Raw response body.

    Returns:
        Parsed events. An empty body or JSON null yields an empty list.

    Raises:
        AssistantTransportError: If the body is not a JSON array of events.
    """
    if not body.strip():
        return []
    try:
        events = _events_adapter.validate_json(body)
    except ValidationError as e:
        raise AssistantTransportError(f"Malformed response payload: {e}") from e
    return events or []


def build_http_client(
    config: AssistantConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the HTTP client used to reach the assistant.

    Redirects are followed, so an http:// URL that moved to https:// still works.

    Args:
        config: Endpoint configuration.
        transport: Optional transport override.

    Returns:
        Configured AsyncClient.
    """
    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=config.timeout,
        follow_redirects=True,
        transport=transport,
    )


class AssistantClient:
    """Client for the assistant's /run endpoint.

    Wraps an httpx.AsyncClient. Pass http_client to swap the transport,
    e.g. an ASGI app or a mock in tests.
    """

    def __init__(
        self,
        config: AssistantConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            http_client: Optional preconfigured client. Built from config if not provided.
        """
        self._config = config or get_assistant_config()
        self._http = http_client or build_http_client(self._config)
        logger.debug(f"Assistant client targeting {self._http.base_url}")

    async def run(self, text: str) -> list[RunEvent]:
        """Send one user message and return the response events.

        Args:
            text: The user's message.

        Returns:
            Response events in server order.

        Raises:
            AssistantAPIError: On a non-2xx status.
            AssistantTransportError: On connection failure, timeout or malformed payload.
        """
        request = RunRequest.from_text(text)
        try:
            response = await self._http.post(RUN_PATH, json=request.model_dump())
        except httpx.RequestError as e:
            logger.warning(f"Request to assistant failed: {e!r}")
            raise AssistantTransportError(f"Could not reach assistant: {e}") from e

        if not response.is_success:
            logger.warning(f"Assistant returned HTTP {response.status_code}")
            raise AssistantAPIError(response.status_code, response.reason_phrase)

        return parse_run_response(response.content)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "AssistantClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


# Module-level default instance
_assistant_client: AssistantClient | None = None


def get_assistant_client() -> AssistantClient:
    """Get or create the process-wide assistant client.

    Returns:
        The shared AssistantClient instance.
    """
    global _assistant_client
    if _assistant_client is None:
        _assistant_client = AssistantClient()
    return _assistant_client


async def close_assistant_client() -> None:
    """Close and forget the process-wide client, if one was created."""
    global _assistant_client
    if _assistant_client is not None:
        await _assistant_client.aclose()
        _assistant_client = None
