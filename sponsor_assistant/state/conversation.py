"""Conversation state manager.

Sole owner of the ConversationState. UI intents come in as method calls,
state changes go out to subscribers as snapshots. Each send makes exactly
one request to the assistant and always ends with an assistant message,
real or synthetic.

Reset during a request does not cancel it. Every send remembers the
generation it started in, and reset() starts a new one; a reply that
settles under an older generation is dropped and leaves is_loading alone.
"""

import logging
from collections.abc import Callable

from sponsor_assistant.client.assistant_client import AssistantAPIError, AssistantEndpoint
from sponsor_assistant.models.schemas import (
    Author,
    ChatMessage,
    ConversationState,
    extract_reply_text,
)

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Sorry, I received an empty response from the server."
API_ERROR_TEMPLATE = "API Error: {status_code} - {status_message}"
NETWORK_ERROR_MESSAGE = (
    "Network Error: Could not connect to the server. "
    "Please check your connection and the URL."
)

StateListener = Callable[[ConversationState], None]


class ConversationManager:
    """Holds the chat state and exchanges user turns with the assistant."""

    def __init__(self, endpoint: AssistantEndpoint) -> None:
        """Initialize with an empty conversation.

        Args:
            endpoint: Assistant endpoint used for every send.
        """
        self._endpoint = endpoint
        self._state = ConversationState()
        self._generation = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ConversationState:
        """Snapshot of the current state."""
        return self._state.model_copy(deep=True)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every change.

        Args:
            listener: Callable receiving the new state.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")

    # === Intents ===

    def change_input(self, text: str) -> None:
        self._state.input_buffer = text
        self._notify()

    def toggle_theme(self) -> None:
        self._state.is_dark_theme = not self._state.is_dark_theme
        self._notify()

    def reset(self) -> None:
        """Clear the conversation and return to the welcome screen.

        A request still in flight completes, but its reply is discarded.
        """
        self._generation += 1
        self._state.messages.clear()
        self._state.show_welcome = True
        self._state.input_buffer = ""
        self._state.is_loading = False
        self._notify()

    async def send(self, from_suggestion: bool = False) -> None:
        """Send the input buffer as a user turn and append the reply.

        Ignored when the trimmed input is empty or a request is in flight.
        Never raises for endpoint failures; they become assistant messages.

        Args:
            from_suggestion: Leave the input buffer untouched when True.
        """
        text = self._state.input_buffer.strip()
        if not text or self._state.is_loading:
            return

        self._state.show_welcome = False
        self._state.messages.append(ChatMessage(text=text, author=Author.USER))
        if not from_suggestion:
            self._state.input_buffer = ""
        self._state.is_loading = True
        generation = self._generation
        self._notify()

        try:
            reply = await self._exchange(text)
            if generation != self._generation:
                logger.info("Discarding assistant reply to a conversation that was reset")
                return
            self._state.messages.append(ChatMessage(text=reply, author=Author.ASSISTANT))
        finally:
            if generation == self._generation:
                self._state.is_loading = False
                self._notify()

    async def send_suggestion(self, text: str) -> None:
        """Send a canned prompt as if the user had typed it."""
        self.change_input(text)
        await self.send(from_suggestion=True)

    async def _exchange(self, text: str) -> str:
        """Call the endpoint and turn any outcome into reply text."""
        try:
            events = await self._endpoint.run(text)
        except AssistantAPIError as e:
            logger.warning(f"Assistant API error: {e}")
            return API_ERROR_TEMPLATE.format(
                status_code=e.status_code, status_message=e.status_message
            )
        except Exception:
            logger.exception("Assistant request failed")
            return NETWORK_ERROR_MESSAGE

        reply = extract_reply_text(events)
        if reply is None:
            logger.warning("Assistant returned an empty response")
            return EMPTY_RESPONSE_MESSAGE
        return reply
