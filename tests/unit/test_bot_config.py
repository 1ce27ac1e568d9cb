"""Unit tests for BotConfig fallbacks and loading."""

import json
from pathlib import Path

import pytest
import pytest_check as check

from chat_widget.models.bot_config import (
    BOOTSTRAP_ERROR_FALLBACK,
    DEFAULT_CONFIG_PATH,
    REPLY_ERROR_FALLBACK,
    WELCOME_FALLBACK,
    BotConfig,
    load_bot_config,
)


class TestBotConfigFallbacks:
    """Tests for display string fallbacks."""

    def test_empty_config_uses_fallbacks(self) -> None:
        """Every display string has a fallback when omitted."""
        config = BotConfig()

        check.equal(config.welcome_text, WELCOME_FALLBACK)
        check.equal(config.bootstrap_error_text, BOOTSTRAP_ERROR_FALLBACK)
        check.equal(config.reply_error_text, REPLY_ERROR_FALLBACK)
        check.equal(config.title_text, "Chatbot")
        check.equal(config.heading_text, "Chatbot")
        check.equal(config.placeholder_text, "Escribe tu mensaje aquí...")
        check.equal(config.submit_text, "Enviar")
        check.equal(config.sub_heading_text, "")

    def test_configured_strings_win(self) -> None:
        config = BotConfig(
            welcomeMessage="Hi!",
            errorMessage="Oops",
            pageTitle="Support",
            submitButtonText="Send",
        )

        check.equal(config.welcome_text, "Hi!")
        check.equal(config.bootstrap_error_text, "Oops")
        check.equal(config.reply_error_text, "Oops")
        check.equal(config.title_text, "Support")
        check.equal(config.submit_text, "Send")

    def test_empty_strings_fall_back(self) -> None:
        """Empty configured strings are treated as missing."""
        config = BotConfig(welcomeMessage="", mainHeading="")

        check.equal(config.welcome_text, WELCOME_FALLBACK)
        check.equal(config.heading_text, "Chatbot")

    def test_css_config_aliases(self) -> None:
        """Style parameters are read from camelCase keys."""
        config = BotConfig.model_validate(
            {"cssConfig": {"primaryColor": "#000", "showTypingIndicator": False}}
        )

        check.equal(config.css_config.primary_color, "#000")
        check.is_false(config.css_config.show_typing_indicator)
        check.equal(config.css_config.secondary_color, "#764ba2")


class TestLoadBotConfig:
    """Tests for load_bot_config."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        config = load_bot_config(tmp_path / "missing.json")

        assert config == BotConfig()

    def test_loads_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bot-config.json"
        path.write_text(json.dumps({"welcomeMessage": "Hello from file"}), encoding="utf-8")

        config = load_bot_config(path)

        assert config.welcome_text == "Hello from file"

    def test_path_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """BOT_CONFIG_PATH is used when no path is passed."""
        path = tmp_path / "env-config.json"
        path.write_text(json.dumps({"pageTitle": "From env"}), encoding="utf-8")
        monkeypatch.setenv("BOT_CONFIG_PATH", str(path))

        assert load_bot_config().title_text == "From env"

    def test_invalid_json_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid bot config"):
            load_bot_config(path)

    def test_invalid_field_type_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad-type.json"
        path.write_text(json.dumps({"cssConfig": {"showTypingIndicator": "maybe"}}))

        with pytest.raises(ValueError, match="Invalid bot config"):
            load_bot_config(path)

    def test_shipped_template_is_valid(self) -> None:
        """The bundled templates/bot-config.json loads cleanly."""
        config = load_bot_config(DEFAULT_CONFIG_PATH)

        check.is_true(config.css_config.show_typing_indicator)
        check.is_not_none(config.welcome_message)
