"""NiceGUI chat page for the event sponsorship assistant."""

from nicegui import ui

from sponsor_assistant.client.assistant_client import get_assistant_client
from sponsor_assistant.models.schemas import Author, ChatMessage, ConversationState
from sponsor_assistant.state.conversation import ConversationManager

TITLE = "Event Sponsor Assistant"

# (card title, prompt sent when the card is clicked)
SUGGESTIONS: list[tuple[str, str]] = [
    ("Find Sponsors", "Help me find potential sponsors for a tech conference"),
    ("Proposal Template", "Create a sponsorship proposal template"),
    ("Package Ideas", "What are effective sponsorship packages?"),
    ("Outreach Tips", "Best practices for sponsor outreach"),
]

CUSTOM_CSS = """
<style>
    :root {
        --es-primary: #1A73E8;
        --es-background: #FFFFFF;
        --es-surface: #F8F9FA;
        --es-on-surface: #202124;
        --es-border: #DADCE0;
        --es-user-bubble: #F1F3F4;
    }
    body.body--dark {
        --es-primary: #8AB4F8;
        --es-background: #212121;
        --es-surface: #303134;
        --es-on-surface: #E8EAED;
        --es-border: #3C4043;
        --es-user-bubble: #2D2D30;
    }

    body { background: var(--es-background); color: var(--es-on-surface); }

    .header { border-bottom: 1px solid var(--es-border); }

    .avatar {
        background: var(--es-primary);
        color: var(--es-background);
        font-weight: 700;
        font-size: 12px;
    }

    .message-user {
        background: var(--es-user-bubble);
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        border: 1px solid var(--es-border);
        border-radius: 18px 18px 18px 4px;
    }

    .suggestion-card {
        background: var(--es-surface);
        border: 1px solid var(--es-border);
        cursor: pointer;
    }
    .suggestion-card:hover { border-color: var(--es-primary); }

    .welcome-title {
        background: linear-gradient(90deg, #4285F4, #9B72CB, #D96570);
        -webkit-background-clip: text;
        color: transparent;
    }

    .input-box {
        background: var(--es-surface);
        border: 1px solid var(--es-border);
        border-radius: 24px;
    }
    .input-box:focus-within { border-color: var(--es-primary); }
</style>
"""


def render_avatar(label: str) -> None:
    with ui.element("div").classes("avatar w-9 h-9 rounded-full flex items-center justify-center"):
        ui.label(label)


def render_message(message: ChatMessage) -> None:
    is_user = message.author == Author.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align} gap-3 items-start"):
        if not is_user:
            render_avatar("ES")
        with ui.element("div").classes(f"max-w-[75%] px-4 py-3 {bubble}"):
            if is_user:
                ui.label(message.text).classes("text-sm whitespace-pre-wrap")
            else:
                ui.markdown(message.text).classes("text-sm")
        if is_user:
            render_avatar("You")


def render_thinking() -> None:
    with ui.row().classes("w-full justify-start gap-3 items-center"):
        render_avatar("ES")
        ui.spinner("dots", size="lg")
        ui.label("Thinking").classes("text-sm opacity-70")


def theme_icon(is_dark_theme: bool) -> str:
    """Icon of the theme the toggle switches to."""
    return "light_mode" if is_dark_theme else "dark_mode"


def chat_page() -> None:
    """Main chat page. Each visit gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    manager = ConversationManager(get_assistant_client())
    client = ui.context.client
    dark = ui.dark_mode(value=manager.state.is_dark_theme)

    # Messages, loading flag and welcome flag decide what the list shows
    rendered_key: tuple | None = None

    def render_welcome() -> None:
        with ui.column().classes("w-full items-center gap-2 pt-12"):
            ui.label("Hello, there!").classes("welcome-title text-4xl font-semibold")
            ui.label("How can I help you with event sponsorship today?").classes(
                "text-lg opacity-70"
            )
            with ui.grid(columns=2).classes("w-full max-w-2xl gap-3 pt-8"):
                for title, prompt in SUGGESTIONS:
                    with (
                        ui.card()
                        .classes("suggestion-card p-4")
                        .mark(title.lower().replace(" ", "-"))
                        .on("click", lambda p=prompt: manager.send_suggestion(p))
                    ):
                        ui.label(title).classes("font-semibold")
                        ui.label(prompt).classes("text-sm opacity-70")

    @ui.refreshable
    def conversation_view(state: ConversationState) -> None:
        if state.show_welcome:
            render_welcome()
            return
        for message in state.messages:
            render_message(message)
        if state.is_loading:
            render_thinking()

    def on_state_change(state: ConversationState) -> None:
        nonlocal rendered_key
        dark.value = state.is_dark_theme
        theme_btn.set_icon(theme_icon(state.is_dark_theme))
        if input_field.value != state.input_buffer:
            input_field.value = state.input_buffer

        has_text = bool(state.input_buffer.strip())
        send_btn.set_visibility(has_text)
        mic_btn.set_visibility(not has_text)
        if state.is_loading:
            send_btn.disable()
        else:
            send_btn.enable()

        key = (
            tuple(message.id for message in state.messages),
            state.is_loading,
            state.show_welcome,
        )
        if key != rendered_key:
            rendered_key = key
            conversation_view.refresh(state)
            scroll.scroll_to(percent=1.0)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto h-screen gap-0"):
        # Header
        with ui.row().classes("w-full header px-5 py-3 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                render_avatar("ES")
                ui.label(TITLE).classes("text-xl")
            with ui.row().classes("items-center gap-1"):
                ui.button(icon="refresh", on_click=manager.reset).props("flat round").mark(
                    "reset"
                )
                theme_btn = (
                    ui.button(
                        icon=theme_icon(manager.state.is_dark_theme),
                        on_click=manager.toggle_theme,
                    )
                    .props("flat round")
                    .mark("theme")
                    .tooltip("Toggle Theme")
                )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll:
            with ui.column().classes("w-full p-5 gap-4"):
                conversation_view(manager.state)

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end no-wrap"):
            with ui.element("div").classes("flex-grow input-box px-4 py-1"):
                input_field = (
                    ui.textarea(
                        placeholder="Ask me about event sponsorship...",
                        on_change=lambda e: manager.change_input(e.value or ""),
                    )
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", manager.send)
                    .mark("message-input")
                )
            send_btn = (
                ui.button(icon="send", on_click=manager.send)
                .props("round unelevated")
                .mark("send")
            )
            # Voice input is not supported; the button is a placeholder
            mic_btn = ui.button(icon="mic").props("round flat disable").mark("mic")

    send_btn.set_visibility(False)
    unsubscribe = manager.subscribe(on_state_change)
    # Fires after the reconnect grace period, not on every dropped socket
    client.on_delete(unsubscribe)


def register_pages() -> None:
    """Register the chat page at the site root."""
    ui.page("/")(chat_page)
