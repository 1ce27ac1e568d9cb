"""Session configuration with environment variable loading.

Pydantic-based settings for the backend client and transcript storage.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _env_or_none(name: str) -> str | None:
    return os.getenv(name) or None


class SessionConfig(BaseModel):
    """Configuration for a chat session.

    Attributes:
        api_base_url: Base URL of the backend serving /api/init-thread and /api/chat.
        storage_key: Key the transcript is stored under.
        max_history_length: Serialized size ceiling in UTF-16 code units.
        keep_last_messages: Messages retained when the ceiling is exceeded.
        storage_quota: Optional capacity of the store, in UTF-16 code units.
        request_timeout: Seconds to wait for the backend (None waits indefinitely).
    """

    # Environment values arrive as strings and are coerced on validation
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_BASE_URL", "http://localhost:3000"),
        description="Backend base URL",
    )
    storage_key: str = Field(
        default_factory=lambda: os.getenv("CHAT_STORAGE_KEY", "chat_history"),
        min_length=1,
        description="Key for the persisted transcript",
    )
    max_history_length: int = Field(
        default_factory=lambda: os.getenv("CHAT_HISTORY_MAX_LENGTH", "6000000"),
        ge=1,
        description="Serialized transcript ceiling before trimming",
    )
    keep_last_messages: int = Field(
        default_factory=lambda: os.getenv("CHAT_HISTORY_KEEP_LAST", "25"),
        ge=1,
        description="Messages kept when the transcript is trimmed",
    )
    storage_quota: int | None = Field(
        default_factory=lambda: _env_or_none("CHAT_STORAGE_QUOTA"),
        ge=1,
        description="Store capacity (None for unlimited)",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: _env_or_none("CHAT_REQUEST_TIMEOUT"),
        gt=0,
        description="Backend request timeout in seconds (None for no timeout)",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths join cleanly."""
        v = v.strip()
        if not v:
            raise ValueError("CHAT_API_BASE_URL must not be empty")
        return v.rstrip("/")


def get_session_config() -> SessionConfig:
    """Create session configuration from environment.

    Returns:
        Configured SessionConfig instance.

    Raises:
        ValueError: If a setting is out of range.
    """
    return SessionConfig()
