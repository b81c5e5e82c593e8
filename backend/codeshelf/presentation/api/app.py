"""
FastAPI application for the code snippet sharing service.
Wires routers, domain error translation and storage lifecycle.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from codeshelf import __version__
from codeshelf.infrastructure.persistence.mongodb_service import mongodb_service
from codeshelf.infrastructure.persistence.seed_data import seed_demo_data
from codeshelf.presentation.api.routes.analysis import create_analysis_router
from codeshelf.presentation.api.routes.auth import create_auth_router
from codeshelf.presentation.api.routes.browse import create_browse_router
from codeshelf.presentation.api.routes.health import create_health_router
from codeshelf.presentation.api.routes.snippets import create_snippets_router
from codeshelf.presentation.api.schemas import ErrorResponse
from codeshelf.shared.config import settings
from codeshelf.shared.di import container
from codeshelf.shared.exceptions import (
    AuthenticationError,
    CodeShelfError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("pymongo").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (AuthenticationError, 401),
    (PermissionDeniedError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def _status_for(exc: CodeShelfError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 400


# ===== Lifespan Context Manager =====


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting application...")
    if settings.storage_backend == "mongodb":
        await mongodb_service.connect()

    if settings.seed_demo_data:
        await seed_demo_data(
            container.get_user_repository(),
            container.get_snippet_repository(),
            container.get_tag_repository(),
        )
    logger.info(f"Application started with {settings.storage_backend} storage")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if settings.storage_backend == "mongodb":
        await mongodb_service.disconnect()
    logger.info("Application shutdown complete")


# ===== Error Translation =====


async def domain_error_handler(request: Request, exc: CodeShelfError) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 401:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    content = {"success": False, "error": exc.message}
    if exc.details:
        content["details"] = exc.details
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", [])[1:]) or "body",
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.warning(f"Validation error on {request.method} {request.url.path}: {len(details)} issue(s)")
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": "Invalid request", "details": details},
    )


# ===== FastAPI App =====


def create_app() -> FastAPI:
    app = FastAPI(
        title="CodeShelf API",
        description="Share code snippets and estimate their time complexity",
        version=__version__,
        lifespan=lifespan,
        responses={status: {"model": ErrorResponse} for status in (400, 401, 403, 404, 409, 422)},
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CodeShelfError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(create_health_router())
    app.include_router(create_auth_router())
    app.include_router(create_snippets_router())
    app.include_router(create_browse_router())
    app.include_router(create_analysis_router())

    return app


app = create_app()
