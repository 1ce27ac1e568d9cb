"""Presentation configuration for the chat page.

Loaded once at start-up from a JSON file in the camelCase ``bot-config``
shape. Every display string is optional and falls back to a fixed default.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "templates" / "bot-config.json"

WELCOME_FALLBACK = "¡Hola! Soy tu asistente. ¿En qué puedo ayudarte hoy?"
BOOTSTRAP_ERROR_FALLBACK = "Disculpa, estoy teniendo problemas. ¿Podrías intentarlo de nuevo?"
REPLY_ERROR_FALLBACK = "Disculpa, estoy teniendo dificultades. ¿Podrías intentarlo de nuevo?"
TITLE_FALLBACK = "Chatbot"
HEADING_FALLBACK = "Chatbot"
PLACEHOLDER_FALLBACK = "Escribe tu mensaje aquí..."
SUBMIT_FALLBACK = "Enviar"


class CssConfig(BaseModel):
    """Style parameters passed through to the page as CSS custom properties."""

    model_config = ConfigDict(populate_by_name=True)

    primary_color: str = Field("#667eea", alias="primaryColor")
    secondary_color: str = Field("#764ba2", alias="secondaryColor")
    message_radius: str = Field("18px", alias="messageRadius")
    input_radius: str = Field("12px", alias="inputRadius")
    chat_width: str = Field("800px", alias="chatWidth")
    chat_height: str = Field("600px", alias="chatHeight")
    font_family: str = Field("Inter, sans-serif", alias="fontFamily")
    font_size: str = Field("14px", alias="fontSize")
    show_typing_indicator: bool = Field(True, alias="showTypingIndicator")


class BotConfig(BaseModel):
    """Display strings and style for the chat widget.

    Attributes:
        welcome_message: First assistant message for a fresh conversation.
        error_message: Assistant message shown when a backend call fails.
        page_title: Browser tab title.
        input_placeholder: Placeholder of the message input.
        submit_button_text: Label of the send button.
        sub_heading: Secondary header line, hidden when empty.
        main_heading: Header title.
        css_config: Style parameters.
    """

    model_config = ConfigDict(populate_by_name=True)

    welcome_message: str | None = Field(None, alias="welcomeMessage")
    error_message: str | None = Field(None, alias="errorMessage")
    page_title: str | None = Field(None, alias="pageTitle")
    input_placeholder: str | None = Field(None, alias="inputPlaceholder")
    submit_button_text: str | None = Field(None, alias="submitButtonText")
    sub_heading: str | None = Field(None, alias="subHeading")
    main_heading: str | None = Field(None, alias="mainHeading")
    css_config: CssConfig = Field(default_factory=CssConfig, alias="cssConfig")

    # Empty strings count as missing, matching the `value || fallback` reading.

    @property
    def welcome_text(self) -> str:
        return self.welcome_message or WELCOME_FALLBACK

    @property
    def bootstrap_error_text(self) -> str:
        return self.error_message or BOOTSTRAP_ERROR_FALLBACK

    @property
    def reply_error_text(self) -> str:
        return self.error_message or REPLY_ERROR_FALLBACK

    @property
    def title_text(self) -> str:
        return self.page_title or TITLE_FALLBACK

    @property
    def heading_text(self) -> str:
        return self.main_heading or HEADING_FALLBACK

    @property
    def sub_heading_text(self) -> str:
        return self.sub_heading or ""

    @property
    def placeholder_text(self) -> str:
        return self.input_placeholder or PLACEHOLDER_FALLBACK

    @property
    def submit_text(self) -> str:
        return self.submit_button_text or SUBMIT_FALLBACK


def load_bot_config(path: Path | str | None = None) -> BotConfig:
    """Load presentation configuration from a JSON file.

    Args:
        path: Config file location. Defaults to BOT_CONFIG_PATH or
              templates/bot-config.json.

    Returns:
        Parsed BotConfig. Defaults when the file does not exist.

    Raises:
        ValueError: If the file cannot be read or is not a valid config.
    """
    config_path = Path(path or os.getenv("BOT_CONFIG_PATH") or DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        logger.info(f"No bot config at {config_path}, using defaults")
        return BotConfig()

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = BotConfig.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid bot config {config_path}: {e}") from e

    logger.info(f"Loaded bot config from {config_path}")
    return config
