"""Conversation state for a single chat page.

Responsibilities:
    - Transcript, thread identifier, pending input and busy flag
    - One-time thread bootstrap against the backend
    - Busy-gated message submission with error recovery
    - Persistence synchronization after every transcript change
    - Environment-driven session settings

Has no knowledge of the page layout; the UI subscribes to change
notifications and renders from the controller's state.
"""

from chat_widget.session.config import SessionConfig, get_session_config
from chat_widget.session.controller import ChatSessionController, StateListener
from chat_widget.session.sync import PersistenceSynchronizer

__all__ = [
    "ChatSessionController",
    "PersistenceSynchronizer",
    "SessionConfig",
    "StateListener",
    "get_session_config",
]
