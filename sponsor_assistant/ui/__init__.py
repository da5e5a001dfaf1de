"""NiceGUI interface - thin visualization layer over the conversation state.

Responsibilities:
    - Welcome screen with suggestion cards
    - Message list with a thinking indicator
    - Input row, reset and theme toggle

Contains no business logic. Every user action is forwarded to the
ConversationManager and the page re-renders from state snapshots.
"""
