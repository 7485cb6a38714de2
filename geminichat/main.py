"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the chat interface.
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


def main() -> None:
    """Application entry point.

    Set CHAT_VARIANT=persona for the persona chat; default is the DSA tutor.
    """
    import uvicorn
    from nicegui import ui

    from geminichat.agent.config import get_chat_config
    from geminichat.api.app import create_app
    from geminichat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    # Fail fast on a missing key or unknown variant
    config = get_chat_config()
    app = create_app(config)

    ui.run_with(
        app,
        title=config.profile.title,
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "geminichat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting {config.variant.value} chat on http://localhost:{port}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
