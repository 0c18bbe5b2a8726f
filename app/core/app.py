"""
FastAPI application factory.

Creates and configures the FastAPI application.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
import logging

from .lifespan import lifespan
from .logging_config import setup_logging
from .logging_middleware import RequestLoggingMiddleware
from app.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CategoryNotFoundError,
    ConcurrentUpdateError,
    DuplicateAssociationError,
    FilmNotFoundError,
    StoreError,
)

logger = logging.getLogger(__name__)

API_TITLE = "CineCatalog API"
API_VERSION = "1.0.0"


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    # ── Initialize logging first ──
    from app.config.settings import get_settings
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_json=settings.log_json,
    )

    app = FastAPI(
        title=API_TITLE,
        description="""
        Film catalog with categories

        Features:
        - Film and category CRUD
        - Film/category associations
        - Paginated, searchable film listing with hyperlinks
        - Bearer-token protected category management
        """,
        version=API_VERSION,
        docs_url="/api-docs",
        lifespan=lifespan
    )

    # ── Request logging middleware (must be added before CORS) ──
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    _register_exception_handlers(app)
    _include_routers(app, settings.api_prefix)
    _register_root_endpoints(app, settings.api_prefix)

    return app


def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        errors.append({"field": field, "message": error.get("msg", "Invalid value")})
    return errors


def _register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with logging."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.warning(f"Validation failed on {len(errors)} field(s) | {request.method} {request.url.path}")
        return JSONResponse(status_code=422, content={"errors": errors})

    @app.exception_handler(FilmNotFoundError)
    async def film_not_found_handler(request: Request, exc: FilmNotFoundError):
        logger.warning(f"Film not found: {exc.film_id} | {request.method} {request.url.path}")
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        logger.warning(f"Category not found: {exc.category_id} | {request.method} {request.url.path}")
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(DuplicateAssociationError)
    async def duplicate_association_handler(request: Request, exc: DuplicateAssociationError):
        logger.warning(f"Duplicate association: {exc} | {request.method} {request.url.path}")
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(ConcurrentUpdateError)
    async def concurrent_update_handler(request: Request, exc: ConcurrentUpdateError):
        logger.warning(f"Concurrent update: {exc} | {request.method} {request.url.path}")
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        logger.warning(f"Authentication failed: {exc} | {request.method} {request.url.path}")
        return JSONResponse(
            status_code=401,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationError)
    async def authorization_handler(request: Request, exc: AuthorizationError):
        logger.warning(f"Authorization failed: {exc} | {request.method} {request.url.path}")
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"Store error: {exc} | {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(PyMongoError)
    async def driver_error_handler(request: Request, exc: PyMongoError):
        logger.error(f"Database error: {exc} | {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": str(StoreError("Database error", exc))})


def _include_routers(app: FastAPI, api_prefix: str) -> None:
    """Include all API routers."""
    from app.routers import category_router, film_router

    app.include_router(film_router.router, prefix=api_prefix)
    app.include_router(category_router.router, prefix=api_prefix)


def _register_root_endpoints(app: FastAPI, api_prefix: str) -> None:
    """Register root and health endpoints."""
    from .dependencies import container

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "endpoints": {
                "films": f"{api_prefix}/films",
                "categories": f"{api_prefix}/categories",
                "docs": "/api-docs"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "services": {
                "mongodb": "connected" if container.store.is_connected else "disconnected",
            }
        }
