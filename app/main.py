"""Main FastAPI application for the Task API."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app import __version__
from app.config import Settings
from app.db.config import create_db_engine
from app.db.init import init_db
from app.exceptions import register_exception_handlers
from app.middleware.api_key import McpApiKeyGuard
from app.middleware.cors import add_cors_middleware
from app.routers import build_mcp_router, build_task_router
from app.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    init_db(app.state.engine)
    logger.info("Application startup complete", version=__version__)
    yield


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        engine: Database engine; created from settings.database_url when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Task API",
        description="REST API for task management, with an API-key gated surface for AI agents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine if engine is not None else create_db_engine(settings.database_url)

    add_cors_middleware(app, settings)
    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Task endpoints: /tasks, and the same operations under /mcp behind the API key
    app.include_router(build_task_router(), prefix=settings.api_prefix)
    app.include_router(build_mcp_router(McpApiKeyGuard(settings.mcp_api_key)), prefix=settings.api_prefix)

    if not settings.mcp_api_key:
        logger.warning("MCP_API_KEY is not set; every /mcp request will be rejected")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
