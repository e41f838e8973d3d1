# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any, Dict
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import users_router, blogs_router, stats_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The MongoDB client is created lazily by the DI container on first use
    and closed here on shutdown.
    """
    logger.info("Blog List API started")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file before settings are read
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Blog List API",
        version="1.0.0",
        description="Multi-user blog list with ownership-aware mutations and statistics",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(users_router, prefix="/api/users")
    application.include_router(blogs_router, prefix="/api/blogs")
    application.include_router(stats_router, prefix="/api/stats")

    @application.get("/healthz")
    async def healthz() -> Dict[str, Any]:
        return {"ok": True}

    return application


# Create application instance
app = create_application()
