"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted on it.
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

    Serves the chat page and /health on one uvicorn server.
    """
    import uvicorn
    from nicegui import ui

    from sponsor_assistant.api.app import create_app
    from sponsor_assistant.client.config import get_assistant_config
    from sponsor_assistant.ui.chat_page import TITLE, register_pages

    # Fail fast on a bad ASSISTANT_BASE_URL / ASSISTANT_TIMEOUT
    config = get_assistant_config()
    app = create_app()
    register_pages()

    ui.run_with(app, title=TITLE, favicon="💬")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Assistant endpoint: {config.base_url}")
    logger.info(f"Chat UI available at http://{host}:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
