# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Todo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    TodoAppException,
    store_exception_handler,
    todo_app_exception_handler,
    validation_exception_handler,
)
from app.routers import health, todos
from lib.database import Database, StoreError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the global settings instance)

    Returns:
        FastAPI: Configured application; the database pool is opened when
            the app starts and closed when it stops
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Runs on startup and shutdown:
        - Startup: Open the connection pool and create the todos table
        - Shutdown: Close every pooled connection
        """
        # Startup
        logger.info(f"Starting Todo API in {settings.ENVIRONMENT} mode")
        database = Database(
            settings.database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            echo=settings.DEBUG,
        )
        database.connect()
        app.state.database = database

        yield

        # Shutdown
        logger.info("Shutting down Todo API")
        database.dispose()

    app = FastAPI(
        title="Todo API",
        description="""
## Task Tracking API

CRUD operations over a single `todo` resource.

| Method | Path | Result |
|--------|------|--------|
| GET | `/todos` | All todos, newest first |
| POST | `/todos` | Create a todo (`{"text": "..."}`) |
| PUT | `/todos/{id}` | Merge-update `text` and/or `completed` |
| DELETE | `/todos/{id}` | Delete a todo |

Errors are returned as `{"error": "<message>"}`.
""",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Todos",
                "description": "Create, list, update and delete todos",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    # =========================================================================
    # Middleware
    # =========================================================================

    # CORS middleware - allows cross-origin requests from the browser client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=settings.is_production,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TodoAppException, todo_app_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE}
        )

    # =========================================================================
    # Routers
    # =========================================================================

    # Root marker and health check endpoints
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # Todo endpoints
    app.include_router(
        todos.router,
        prefix="/todos",
        tags=["Todos"]
    )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=default_settings.API_HOST,
        port=default_settings.PORT,
        reload=default_settings.is_development,
    )
