#!/usr/bin/env python3
"""
Main entry point for the Podcast Explorer API
Serves one browsing session: the show catalog is fetched once at startup,
then filtered, sorted and paged through the /view endpoints.
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from explorer.config import Settings
from explorer.dependencies.session import get_app_settings, get_coordinator, get_record_source
from explorer.routers import catalog, health, view
from explorer.services.record_source import schedule_populate

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> int:
    """Configure root logging from settings (DEBUG forces the debug level)"""
    log_level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if settings.debug:
        logger.debug("🐛 DEBUG mode enabled - verbose logging activated")
    else:
        logger.info(f"📊 Log level set to: {logging.getLevelName(log_level)}")
    return log_level


configure_logging(get_app_settings())


def create_app(load_on_startup: bool = True) -> FastAPI:
    """Build the FastAPI application; load_on_startup=False skips the catalog fetch"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        task = None
        if load_on_startup:
            settings = get_app_settings()
            logger.info(f"🚀 Starting Podcast Explorer - catalog from {settings.api_url}")
            # Runs in the background so /view reports the loading state meanwhile
            task = schedule_populate(get_coordinator(), get_record_source())

        yield

        logger.info("🛑 Shutting down Podcast Explorer")
        if task is not None and not task.done():
            task.cancel()

    app = FastAPI(
        title="Podcast Explorer API",
        description="Search, filter, sort and page through the podcast catalog",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_app_settings().allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(catalog.router, tags=["catalog"])
    app.include_router(view.router, tags=["view"])
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    logger.info(f"🚀 Starting Podcast Explorer API on port {port}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=False
    )
