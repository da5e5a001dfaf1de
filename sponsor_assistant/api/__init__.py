"""FastAPI host for the chat UI.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI in main)
"""

from sponsor_assistant.api.app import create_app

__all__ = ["create_app"]
