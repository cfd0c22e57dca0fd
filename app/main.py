"""FastAPI application entry point."""

import logging
import typing as t
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import SETTINGS
from app.core.database import DatabaseSessionManager
from app.core.globals import OPENAPI_TAGS, STORAGE_ERROR_MESSAGE
from app.routers import ROUTER

logging.basicConfig(
    level=logging.DEBUG if SETTINGS.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
LOGGER: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> t.AsyncGenerator[None, None]:
    """Application lifespan events.

    args:
        application (FastAPI): The FastAPI application instance.
    """
    LOGGER.info("Starting FoodShare API...")
    database: DatabaseSessionManager = DatabaseSessionManager(
        SETTINGS.database_url, echo=SETTINGS.debug
    )
    await database.create_all()
    application.state.database = database
    LOGGER.info("Database tables initialized")

    yield

    LOGGER.info("Shutting down FoodShare...")
    await database.close()
    application.state.database = None
    LOGGER.info("Cleanup complete")


APPLICATION: FastAPI = FastAPI(
    title=SETTINGS.app_name,
    description="FoodShare - Share surplus food with your community",
    version=SETTINGS.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=OPENAPI_TAGS,
)

APPLICATION.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

APPLICATION.include_router(ROUTER)


@APPLICATION.exception_handler(SQLAlchemyError)
async def storage_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Answer store failures with a generic message.

    Args:
        request (Request): The failed request.
        exc (SQLAlchemyError): The store failure.

    Returns:
        JSONResponse: A 500 response without internal details.
    """
    LOGGER.error(
        "Storage error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": STORAGE_ERROR_MESSAGE},
    )


@APPLICATION.get("/", include_in_schema=False)
async def root() -> PlainTextResponse:
    """Root endpoint.

    Returns:
        PlainTextResponse: A liveness message.
    """
    return PlainTextResponse("FoodShare API is running")


@APPLICATION.get("/health", tags=["Health"])
async def health_check(request: Request) -> t.Dict[str, str]:
    """Health check endpoint for monitoring.

    Args:
        request (Request): The incoming request.

    Returns:
        t.Dict[str, str]: A dictionary indicating the health status.
    """
    database: DatabaseSessionManager | None = getattr(
        request.app.state, "database", None
    )
    if database is None:
        return {"status": "starting"}
    await database.ping()
    return {"status": "healthy"}
