"""FastAPI application factory.

Hosts the NiceGUI chat page and a health check. Chat traffic goes straight
from the page's session to the Generative Language API; there are no chat
routes here.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geminichat import __version__
from geminichat.agent.config import ChatConfig, get_chat_config

logger = logging.getLogger(__name__)


def create_app(config: ChatConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Chat configuration reported by /health.
                Loads from environment if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_chat_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            f"Starting Gemini Chat ({config.variant.value} variant, model {config.model_name})..."
        )
        yield
        logger.info("Shutting down Gemini Chat...")

    application = FastAPI(
        title="Gemini Chat",
        description=(
            "Single-page chat interface that forwards the conversation to the "
            "Google Generative Language API."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {
            "status": "healthy",
            "service": "geminichat",
            "variant": config.variant.value,
            "model": config.model_name,
        }

    return application
