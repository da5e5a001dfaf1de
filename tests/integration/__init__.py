"""Integration tests for components working together.

Coverage:
    - Conversation manager with the real AssistantClient
    - FastAPI fake backend reached through httpx.ASGITransport
    - Application host health endpoint and lifespan
    - Chat page driven by NiceGUI's simulated user

The only socket used is a refused local connection.
"""
