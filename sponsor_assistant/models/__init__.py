"""Pydantic models for the conversation and the assistant API.

Models:
    - ChatMessage: Individual message in the conversation
    - ConversationState: Everything the chat screen renders
    - RunRequest: Outgoing payload for POST /run
    - RunEvent: One event of the /run response
"""

from sponsor_assistant.models.schemas import (
    APP_NAME,
    SESSION_ID,
    USER_ID,
    Author,
    ChatMessage,
    ConversationState,
    EventContent,
    MessagePart,
    NewMessage,
    RunEvent,
    RunRequest,
    extract_reply_text,
)

__all__ = [
    "APP_NAME",
    "SESSION_ID",
    "USER_ID",
    "Author",
    "ChatMessage",
    "ConversationState",
    "EventContent",
    "MessagePart",
    "NewMessage",
    "RunEvent",
    "RunRequest",
    "extract_reply_text",
]
