"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → structured JSON responses
    - Schema bootstrapped and seed user ensured before traffic is accepted
    - Connection factory lives on app.state, disposed on shutdown or failed startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Initializer receives the factory explicitly, no global database singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.database import DatabaseConnectionFactory
from users_api.infrastructure.database_initializer import DatabaseInitializer
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. The engine is disposed even if startup fails."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    factory = DatabaseConnectionFactory(settings.database_url)
    try:
        await DatabaseInitializer(
            factory, seed_full_name=settings.seed_user_full_name,
        ).initialize()
        app.state.connection_factory = factory
        logger.info("Users API started")
        yield
        logger.info("Users API shutting down")
    finally:
        await factory.dispose()


app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
