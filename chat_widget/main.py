"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted (port 8000 by default).
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from chat_widget.api.app import create_app
    from chat_widget.models.bot_config import load_bot_config
    from chat_widget.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    port = int(os.getenv("PORT", "8000"))

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=load_bot_config().title_text,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chat-widget-secret"),
    )

    logger.info(f"Chat UI available at http://localhost:{port}/")
    logger.info(f"Backend expected at {os.getenv('CHAT_API_BASE_URL', 'http://localhost:3000')}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI page on its own server (port 8080)."""
    from chat_widget.ui.chat_page import main as run_page

    run_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI page on port 8080.
    Default is integrated mode (FastAPI and NiceGUI on one port).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Chat Widget in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
