"""
Inventory Management API

This module builds the FastAPI application for the Inventory Tracker: the
authenticated inventory CRUD routes under ``/api/inventory``, JSON error
bodies, cross-origin policy, and the lifecycle of the record store.

The service exposes:
- CRUD endpoints for inventory management (bearer token required)
- Root endpoint: liveness message
- Health endpoint: Provides service health status for monitoring and orchestration

Attributes:
    app (FastAPI): Application instance backed by the store at DATABASE_URL.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import routes, schemas
from .config import CORS_ORIGINS, DATABASE_URL
from .database import Store

logger = logging.getLogger(__name__)

API_RUNNING_MESSAGE = "Inventory Management API is running"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}`` (dict details are sent as-is)."""
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 with one entry per offending field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.info(f"Rejected invalid request to {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": errors},
    )


def create_app(store: Optional[Store] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Record store to use. When omitted, one is opened from
            DATABASE_URL at startup and disposed at shutdown.

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_store = None
        if getattr(app.state, "store", None) is None:
            owned_store = Store(DATABASE_URL)
            owned_store.create_all()
            app.state.store = owned_store
        yield
        if owned_store is not None:
            owned_store.dispose()
            app.state.store = None

    app = FastAPI(
        title="Inventory Management API",
        description="API for tracking inventory items",
        version="1.0.0",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(routes.router)

    @app.get("/", response_model=schemas.Message)
    def root():
        """Liveness message; no authentication required."""
        return {"message": API_RUNNING_MESSAGE}

    @app.get("/healthz", response_model=dict)
    def health():
        """
        Health check endpoint for the inventory service.

        Returns:
            dict: {"status": "healthy"} while the service is operational.
        """
        return {"status": "healthy"}

    return app


app = create_app()
