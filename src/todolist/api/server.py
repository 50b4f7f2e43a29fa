import logging
import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse

from todolist import __version__
from todolist.api.routes import health, todos

# Configure logging based on LOGLEVEL environment variable
loglevel = os.getenv("LOGLEVEL", "INFO").upper()
log_level_map = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
log_level = log_level_map.get(loglevel, logging.INFO)

logging.basicConfig(level=log_level, format="%(message)s")

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
)

logger = structlog.get_logger()


async def todolist_http_exception_handler(
    request: Request,
    exc: HTTPException,
) -> JSONResponse:
    """Return standardized error responses for todolist exceptions."""
    if (
        exc.headers
        and exc.headers.get("X-Todolist-Error") == "1"
        and isinstance(exc.detail, dict)
    ):
        return JSONResponse(
            status_code=exc.status_code, content=exc.detail, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI startup/shutdown events."""
    await logger.ainfo(
        "fastapi.startup", message="todolist API starting...", version=__version__
    )
    yield
    await logger.ainfo("fastapi.shutdown", message="todolist API shutting down...")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="todolist API",
        description="Single ordered task list with add, toggle, remove and list",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_exception_handler(HTTPException, todolist_http_exception_handler)

    app.include_router(todos.router, prefix="/api/v1", tags=["todos"])
    app.include_router(health.router, tags=["health"])

    return app


app = create_app()
