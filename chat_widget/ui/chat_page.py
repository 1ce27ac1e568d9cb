"""NiceGUI chat page bound to a ChatSessionController."""

import html
import logging
import os
from collections.abc import Callable, MutableMapping

from nicegui import Client, app, background_tasks, ui

from chat_widget.client.backend import BackendClient
from chat_widget.models.bot_config import BotConfig, CssConfig, load_bot_config
from chat_widget.models.schemas import ChangeKind, Message
from chat_widget.session.config import SessionConfig, get_session_config
from chat_widget.session.controller import ChatSessionController
from chat_widget.storage.transcript import KeyValueTranscriptStore

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .chat-container {
        margin: 0 auto;
        width: 100%;
        max-width: var(--chat-width);
        font-family: var(--font-family);
        font-size: var(--font-size);
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .chat-scroll { height: var(--chat-height); }

    .message-user {
        background: var(--color-primary);
        color: white;
        border-radius: var(--message-radius) var(--message-radius) 4px var(--message-radius);
        white-space: pre-wrap;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: var(--message-radius) var(--message-radius) var(--message-radius) 4px;
        white-space: pre-wrap;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: var(--color-primary);
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: var(--input-radius);
    }
    .input-box:focus-within { border-color: var(--color-primary); }

    .send-btn { background: var(--color-primary) !important; }
</style>
"""


def css_variables(css: CssConfig) -> str:
    """Render style parameters as CSS custom properties for an inline style."""
    variables = {
        "--color-primary": css.primary_color,
        "--color-secondary": css.secondary_color,
        "--message-radius": css.message_radius,
        "--input-radius": css.input_radius,
        "--chat-width": css.chat_width,
        "--chat-height": css.chat_height,
        "--font-family": css.font_family,
        "--font-size": css.font_size,
    }
    return "; ".join(f"{name}: {value}" for name, value in variables.items())


def header_gradient(css: CssConfig) -> str:
    return f"background: linear-gradient(to right, {css.secondary_color}, {css.primary_color})"


def shows_typing_indicator(controller: ChatSessionController, css: CssConfig) -> bool:
    return controller.is_busy and css.show_typing_indicator


def follow_controller(
    controller: ChatSessionController,
    client: Client,
    refresh: Callable[[], None],
) -> None:
    """Re-render on transcript and busy changes while the client lives.

    A reply can land after the browser is gone, so the listener is dropped
    when the client is deleted and skips rendering into a deleted client.
    """

    def on_change(_: ChatSessionController, change: ChangeKind) -> None:
        if client.is_deleted:
            return
        if change in (ChangeKind.MESSAGES, ChangeKind.BUSY):
            refresh()

    controller.add_listener(on_change)
    client.on_delete(lambda: controller.remove_listener(on_change))


def build_controller(
    storage: MutableMapping[str, str],
    settings: SessionConfig,
    bot_config: BotConfig,
) -> ChatSessionController:
    """Wire a controller to the backend and the per-browser store."""
    store = KeyValueTranscriptStore(
        storage,
        key=settings.storage_key,
        max_length=settings.max_history_length,
        keep_last=settings.keep_last_messages,
        quota=settings.storage_quota,
    )
    client = BackendClient(settings.api_base_url, timeout=settings.request_timeout)
    return ChatSessionController(client, store, bot_config)


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    bot_config = load_bot_config()
    css = bot_config.css_config
    controller = build_controller(app.storage.user, get_session_config(), bot_config)

    ui.page_title(bot_config.title_text)
    ui.add_head_html(
        f'<meta name="description" content="{html.escape(bot_config.sub_heading_text)}">'
    )
    ui.add_head_html(CUSTOM_CSS)

    messages_container: ui.column
    scroll_area: ui.scroll_area

    def render_message(msg: Message) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            ui.label(msg.content).classes(f"max-w-[70%] px-4 py-3 {bubble}")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in controller.messages:
                render_message(msg)
            if shows_typing_indicator(controller, css):
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    # === UI Layout ===
    with ui.column().classes("chat-container gap-0").style(css_variables(css)):
        # Header
        with ui.column().classes("w-full px-5 py-4 gap-1").style(header_gradient(css)):
            ui.label(bot_config.heading_text).classes("text-lg font-semibold text-white")
            if bot_config.sub_heading_text:
                ui.label(bot_config.sub_heading_text).classes("text-sm text-white/80")

        # Messages
        with ui.scroll_area().classes("chat-scroll w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-1"):
                (
                    ui.input(placeholder=bot_config.placeholder_text)
                    .props("borderless dense")
                    .classes("w-full")
                    .bind_value(controller, "pending_input")
                    .bind_enabled_from(controller, "is_busy", backward=lambda busy: not busy)
                    .on("keydown.enter", controller.submit_pending)
                )
            (
                ui.button(bot_config.submit_text, on_click=controller.submit_pending)
                .props("unelevated")
                .classes("send-btn text-white")
                .bind_enabled_from(controller, "is_busy", backward=lambda busy: not busy)
            )

    refresh_messages()

    client = ui.context.client
    follow_controller(controller, client, refresh_messages)
    client.on_disconnect(controller.teardown)

    await client.connected()
    logger.info(f"Chat page connected with {len(controller.messages)} stored messages")
    background_tasks.create(controller.bootstrap(), name="bootstrap-thread")


def main() -> None:
    ui.run(
        title="Chat Widget",
        port=8080,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chat-widget-secret"),
    )


if __name__ == "__main__":
    main()
