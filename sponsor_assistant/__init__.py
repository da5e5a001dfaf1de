"""Event Sponsor Assistant - chat front-end for an event sponsorship assistant.

Combines NiceGUI for the chat page, httpx for the assistant API,
FastAPI/uvicorn for hosting, and Pydantic for data validation.

Components:
    - state: Conversation state manager (messages, input, loading, welcome)
    - client: HTTP client and configuration for the remote assistant
    - models: Chat and wire-format schemas
    - ui: Web interface for chat interactions
    - api: FastAPI host with health endpoint
"""

__version__ = "0.1.0"
