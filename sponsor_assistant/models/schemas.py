"""Pydantic models for chat state and the assistant's /run wire format."""

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Every request shares one nominal identity on the backend
APP_NAME = "chat_with_human"
USER_ID = "demo_user"
SESSION_ID = "default_session"


class Author(str, Enum):
    """Who wrote a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message shown in the conversation.

    Attributes:
        id: Unique message identifier.
        text: The message text.
        author: Whether the user or the assistant wrote it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    text: str
    author: Author


class ConversationState(BaseModel):
    """Everything the chat screen renders.

    Attributes:
        messages: Messages in display order.
        input_buffer: Current content of the input box.
        is_loading: Whether a request to the assistant is in flight.
        show_welcome: Whether the welcome screen is visible.
        is_dark_theme: Presentation-only theme flag.
    """

    messages: list[ChatMessage] = Field(default_factory=list)
    input_buffer: str = ""
    is_loading: bool = False
    show_welcome: bool = True
    is_dark_theme: bool = True


class MessagePart(BaseModel):
    text: str | None = None


class NewMessage(BaseModel):
    role: str = "user"
    parts: list[MessagePart]


class RunRequest(BaseModel):
    """Request payload for the assistant's POST /run endpoint."""

    app_name: str = APP_NAME
    user_id: str = USER_ID
    session_id: str = SESSION_ID
    new_message: NewMessage

    @classmethod
    def from_text(cls, text: str) -> "RunRequest":
        """Build a request carrying a single user text part."""
        return cls(new_message=NewMessage(parts=[MessagePart(text=text)]))


class EventContent(BaseModel):
    parts: list[MessagePart] | None = None


class RunEvent(BaseModel):
    """One event from the /run response array.

    The backend sends many more fields per event; only the content is kept.
    """

    content: EventContent | None = None


def extract_reply_text(events: list[RunEvent]) -> str | None:
    """Return the text of the first part of the first event, if any.

    Args:
        events: Events returned by the assistant.

    Returns:
        The reply text, or None when the response carries no text.
    """
    if not events:
        return None
    content = events[0].content
    if content is None or not content.parts:
        return None
    return content.parts[0].text
