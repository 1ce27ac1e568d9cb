"""Pydantic models for transcript data, endpoint payloads and configuration.

Provides type safety and validation at every boundary the widget touches.

Models:
    - Message: Individual transcript entry (user or assistant)
    - ChangeKind: Conversation state change notifications
    - InitThreadResponse: Body of GET /api/init-thread
    - ChatRequest: Body sent to POST /api/chat
    - ChatReply: Body returned by POST /api/chat
    - BotConfig: Display strings and style with hardcoded fallbacks
"""

from chat_widget.models.bot_config import BotConfig, CssConfig, load_bot_config
from chat_widget.models.schemas import (
    ChangeKind,
    ChatReply,
    ChatRequest,
    InitThreadResponse,
    Message,
    Role,
)

__all__ = [
    "BotConfig",
    "ChangeKind",
    "ChatReply",
    "ChatRequest",
    "CssConfig",
    "InitThreadResponse",
    "Message",
    "Role",
    "load_bot_config",
]
