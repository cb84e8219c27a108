"""FastAPI application for the courtflow animation engine."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courtflow import __version__
from courtflow.api.routers import animations_router, playback_router, playback_websocket_router
from courtflow.config import configure_logging, get_config
from courtflow.playback import get_session_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    for problem in get_config().validate():
        logger.warning("Configuration problem: %s", problem)
    logger.info("courtflow API starting up")
    yield
    logger.info("courtflow API shutting down")
    await get_session_manager().cleanup_all()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="courtflow API",
        description="Play diagram animation timelines and playback",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Vite dev server
            "http://localhost:5173",  # Alternative Vite port
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(animations_router, prefix="/api/v1")
    app.include_router(playback_router, prefix="/api/v1")
    app.include_router(playback_websocket_router)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "courtflow API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        sessions = await get_session_manager().list_sessions()
        return {"status": "healthy", "active_sessions": len(sessions)}

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    configure_logging()
    uvicorn.run(
        "courtflow.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
