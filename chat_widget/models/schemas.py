from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class ChangeKind(str, Enum):
    """Which part of the conversation state changed."""

    MESSAGES = "messages"
    BUSY = "busy"
    THREAD = "thread"


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        role: Who produced the message (user or assistant).
        content: The message text, stored exactly as entered or received.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)


class InitThreadResponse(BaseModel):
    """Response body of GET /api/init-thread.

    Attributes:
        thread_id: Opaque backend conversation identifier.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    thread_id: str = Field(..., alias="threadId")


class ChatRequest(BaseModel):
    """Request payload for POST /api/chat.

    Attributes:
        message: The user's raw message text.
        thread_id: Thread identifier, null until the thread is initialized.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    thread_id: str | None = Field(None, alias="threadId")


class ChatReply(BaseModel):
    """Response body of POST /api/chat.

    A missing reply is a valid response and means nothing to display.

    Attributes:
        reply: The assistant's answer, if any.
    """

    reply: str | None = None
