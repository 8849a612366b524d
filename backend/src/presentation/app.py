"""FastAPI application factory."""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from infrastructure.config import get_logger, get_settings
from infrastructure.database import close_db, init_db
from presentation.api.error_handlers import register_error_handlers
from presentation.api.middleware import request_context_middleware
from presentation.api.v1.endpoints import health, todos, users


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = get_logger("app")
    
    # Startup
    await init_db()
    logger.info("Application started", {"version": app.version})
    
    yield
    
    # Shutdown
    await close_db()
    logger.info("Application stopped")


def create_app() -> FastAPI:
    """Build the FastAPI app with routers, middleware and error handlers."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
    )
    
    app.middleware("http")(request_context_middleware)
    register_error_handlers(app)
    
    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix)
    app.include_router(users.router, prefix=settings.api_v1_prefix)
    app.include_router(todos.router, prefix=settings.api_v1_prefix)
    
    return app
