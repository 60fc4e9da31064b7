import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from src.core.config import settings
from src.core.logger import setup_logging
from src.core.response.handlers import global_exception_handler, validation_exception_handler

# Import routers from apps
from src.apps.posts import post_router
from src.apps.posts.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the store is already attached by create_app
    setup_logging(settings.LOG_LEVEL)
    logger.info(
        "✅ Post store ready with %s post(s)", app.state.post_store.count()
    )
    yield
    # Shutdown: nothing to flush, posts live in memory only
    logger.info("🔄 Shutting down...")


def create_app(store: Optional[PostRepository] = None) -> FastAPI:
    """Build the API around ``store``, or a fresh empty store if none is given."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.post_store = store if store is not None else PostRepository()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Add exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)

    # Health check endpoints
    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {
            "message": "🚀 Server is running!",
            "status": "healthy",
            "version": settings.PROJECT_VERSION,
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "message": "Service is running normally"}

    # Include app routers
    app.include_router(post_router)

    return app


app = create_app()


def run(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Serve the module-level app with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
