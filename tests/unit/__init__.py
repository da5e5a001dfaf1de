"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and reply extraction
    - client/: Configuration and HTTP outcome mapping (httpx.MockTransport)
    - state/: Conversation intents, guards and the reset race

No network access. The endpoint is scripted in-process.
"""
