from __future__ import annotations

from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .logging_config import setup_logging
from .middleware import RequestLoggerMiddleware
from .repositories import InMemoryTodoRepository, TodoStore
from .routers import todos as todos_router
from .settings import Settings, get_settings

log = structlog.get_logger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items."},
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent 400 JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    log.warning("request validation failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: The TodoStore the application owns. A fresh InMemoryTodoRepository
            is created when omitted.
        settings: Application settings; read from the environment when omitted.

    Returns:
        A configured FastAPI instance with the store on ``app.state.store``.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Todo API",
        description="REST API for managing todo items backed by an in-memory store.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryTodoRepository()

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggerMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy", "backend": "memory"}

    app.include_router(todos_router.router)
    log.info("application created", env=settings.app_env, store=type(app.state.store).__name__)
    return app


# PUBLIC_INTERFACE
def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("todo_api.main:create_app", factory=True, host=settings.host, port=settings.port)
