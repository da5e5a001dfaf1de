"""FastAPI application factory and configuration.

Hosts the chat UI and a health endpoint. The lifespan closes the shared
assistant client on shutdown.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sponsor_assistant import __version__
from sponsor_assistant.client.assistant_client import close_assistant_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Event Sponsor Assistant...")
    yield
    await close_assistant_client()
    logger.info("Shutting down Event Sponsor Assistant...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Event Sponsor Assistant",
        description="Chat front-end for the event sponsorship assistant service.",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "event-sponsor-assistant"}

    return application
