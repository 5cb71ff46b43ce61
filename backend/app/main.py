"""Starter API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StarterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup only when DATABASE_URL is set;
      engine disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import data, email, health
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_configured:
        init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    else:
        logger.warning("DATABASE_URL not set; /api/data will return 500")
    if not settings.email_configured:
        logger.warning("RESEND_API_KEY not set; /api/email/send is disabled")
    logger.info("Starter API started")
    yield
    await close_db()
    logger.info("Starter API shutting down")


app = FastAPI(
    title="Starter API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(data.router)
app.include_router(email.router)

register_error_handlers(app)
