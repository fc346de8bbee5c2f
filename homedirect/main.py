"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from homedirect.application.services.auth_service import seed_admin
from homedirect.config import get_settings
from homedirect.core.exceptions import AppError, global_exception_handler
from homedirect.core.logging import configure_logging
from homedirect.core.middleware import setup_middleware
from homedirect.infrastructure.mailer import Notifier, build_notifier
from homedirect.infrastructure.repositories.user_repository import InMemoryUserRepository
from homedirect.infrastructure.store import InMemoryStore

# Import routers
from homedirect.interfaces.api.admin import router as admin_router
from homedirect.interfaces.api.auth import router as auth_router
from homedirect.interfaces.api.favorites import router as favorites_router
from homedirect.interfaces.api.listings import router as listings_router

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def create_app(store: InMemoryStore | None = None, notifier: Notifier | None = None) -> FastAPI:
    """Build the application around a store. Each call gets its own state."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan — startup and shutdown events."""
        logger.info("Starting HomeDirect...", env=settings.ENVIRONMENT)

        app.state.store = store if store is not None else InMemoryStore()
        app.state.notifier = notifier if notifier is not None else build_notifier(settings)
        seed_admin(InMemoryUserRepository(app.state.store), settings)

        yield

        logger.info("HomeDirect stopped", store=repr(app.state.store))

    app = FastAPI(
        title="HomeDirect — Real Estate Classifieds",
        description="API Backend — property listings, moderation and favorites",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Middleware (Correlation ID, CORS, Logging)
    setup_middleware(app)

    # Domain errors are rendered by the exception middleware; anything else reaches the 500 handler
    app.add_exception_handler(AppError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # Include routers
    app.include_router(auth_router)
    app.include_router(listings_router)
    app.include_router(admin_router)
    app.include_router(favorites_router)

    @app.get("/")
    def root():
        return {
            "name": "HomeDirect",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
