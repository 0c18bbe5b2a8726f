"""
Application lifespan management.

Handles startup and shutdown events.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from .dependencies import container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Connects the catalog store at startup and disconnects it at shutdown.
    """
    # Startup
    logger.info("Starting CineCatalog API...")
    await container.initialize()
    logger.info("CineCatalog API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down CineCatalog API...")
    await container.shutdown()
    logger.info("CineCatalog API shutdown complete")
