"""Content server FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import LOG_LEVEL
from api.routes import catalog, content
from api.utils import content_dir
from core.logging_setup import setup_console_logging

setup_console_logging(LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where content is served from."""
    logging.getLogger(__name__).info("Serving content from %s", content_dir())
    yield


app = FastAPI(title="Security+ Practice Quiz Content Server", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(content.router)
app.include_router(catalog.router)
