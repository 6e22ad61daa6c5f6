"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from bachelor_point.api.dependencies import get_blob_store
from bachelor_point.api.routes import accounts, health, listings
from bachelor_point.config import settings
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import DomainError
from bachelor_point.log_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.log_level, json_output=settings.log_json)
    settings.validate_runtime()
    logger.info("bachelor_point_starting", env=settings.app_env)
    yield
    logger.info("bachelor_point_stopping")


# ---- Error rendering -------------------------------------------------------
# Every failure is a JSON object with a "message" field. Request bodies are
# never echoed back, since they can carry identity documents.

async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload", "fields": fields},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Bachelor Point",
        description="Room rental listings with identity-verified student accounts.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health.router)
    app.include_router(accounts.router)
    app.include_router(listings.router)

    # Blob references double as public URL paths: /<namespace>/<filename>
    blob_store = get_blob_store()
    blob_store.ensure_namespaces()
    for namespace in BlobNamespace:
        app.mount(
            f"/{namespace.value}",
            StaticFiles(directory=blob_store.namespace_dir(namespace)),
            name=namespace.value,
        )

    return app


app = create_app()
