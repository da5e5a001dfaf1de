"""Pytest fixtures and shared test configuration.

Fixtures:
    - assistant_config: Config pointing at the in-process test host
    - endpoint: Scripted fake endpoint for state manager tests
    - manager: ConversationManager wired to the scripted endpoint
    - fake_backend: FastAPI app standing in for the assistant service
    - assistant_client: Real AssistantClient talking to fake_backend via ASGI
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from sponsor_assistant.client.assistant_client import AssistantClient
from sponsor_assistant.client.config import AssistantConfig
from sponsor_assistant.state.conversation import ConversationManager
from tests.fakes import ScriptedEndpoint, create_fake_backend


@pytest.fixture
def assistant_config() -> AssistantConfig:
    """Return config for the in-process test host."""
    return AssistantConfig(base_url="http://test", timeout=5.0)


@pytest.fixture
def endpoint() -> ScriptedEndpoint:
    """Return a scripted endpoint that answers "ok" by default."""
    return ScriptedEndpoint()


@pytest.fixture
def manager(endpoint: ScriptedEndpoint) -> ConversationManager:
    """Return a fresh conversation manager using the scripted endpoint."""
    return ConversationManager(endpoint)


@pytest.fixture
def fake_backend() -> tuple[FastAPI, list[dict[str, Any]]]:
    """Return the fake assistant app and its received request bodies."""
    return create_fake_backend()


@pytest.fixture
async def assistant_client(
    assistant_config: AssistantConfig,
    fake_backend: tuple[FastAPI, list[dict[str, Any]]],
) -> AsyncGenerator[AssistantClient]:
    """Create an AssistantClient routed to the fake backend.

    Yields:
        Client whose requests never leave the process.
    """
    app, _ = fake_backend
    transport = ASGITransport(app=app)
    http_client = AsyncClient(transport=transport, base_url=assistant_config.base_url)
    async with AssistantClient(config=assistant_config, http_client=http_client) as client:
        yield client
