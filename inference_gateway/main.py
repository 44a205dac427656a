"""Inference Gateway API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InferenceGatewayError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py and are registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inference_gateway.api.error_handlers import register_error_handlers
from inference_gateway.api.routes import health, inference
from inference_gateway.config import get_settings
from inference_gateway.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Inference Gateway started (storage_root={settings.storage_root})",
    )
    yield
    logger.info("Inference Gateway shutting down")


app = FastAPI(
    title="Inference Gateway API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(inference.router)

register_error_handlers(app)
