"""
Profiles App - FastAPI Application

Local API in front of the profile store: registration, login and user management.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from profiles_app import __version__
from profiles_app.config import get_settings
from profiles_app.context import AppContext
from profiles_app.core.log import setup_logging
from profiles_app.routers import auth, health, users

logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.
    
    Args:
        context: Application context to serve; a default one built from
            settings is used when omitted
    """
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        
        Startup:
        - Configure logging
        - Create profiles indexes
        
        Shutdown:
        - Close the MongoDB client
        """
        app_context = context or AppContext()
        setup_logging(app_context.settings.log_level)
        logger.info("Starting up Profiles App...")
        
        try:
            await app_context.prepare()
        except Exception as e:
            logger.warning("Database initialization warning: %s", e)
        
        app.state.context = app_context
        try:
            yield
        finally:
            logger.info("Shutting down Profiles App...")
            app_context.close()
    
    app = FastAPI(
        title="Profiles App API",
        description="Profile registration, login and user management.",
        version=__version__,
        lifespan=lifespan,
    )
    
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Profiles App API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }
    
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
