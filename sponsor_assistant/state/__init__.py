"""Conversation state management.

The only place ConversationState is mutated. Independent of any UI toolkit;
renderers subscribe to state snapshots.
"""

from sponsor_assistant.state.conversation import (
    API_ERROR_TEMPLATE,
    EMPTY_RESPONSE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    ConversationManager,
    StateListener,
)

__all__ = [
    "API_ERROR_TEMPLATE",
    "EMPTY_RESPONSE_MESSAGE",
    "NETWORK_ERROR_MESSAGE",
    "ConversationManager",
    "StateListener",
]
