"""
Fantasy Trade Analytics API - Main Application

FastAPI application for trade scoring.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trade_analytics import __version__
from trade_analytics.api.routes import trade_analyzer
from trade_analytics.config import get_settings
from trade_analytics.logging_utils import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    setup_logging("DEBUG" if settings.debug else settings.log_level)
    logger.info("Starting Fantasy Trade Analytics API v%s", __version__)
    logger.info("Debug mode: %s", settings.debug)

    yield

    logger.info("Shutting down Fantasy Trade Analytics API")


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "trade_analyzer": "/api/trade-analyzer",
            },
        }

    # Register API routes
    app.include_router(trade_analyzer.router, prefix="/api/trade-analyzer", tags=["Trade Analyzer"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "trade_analytics.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
