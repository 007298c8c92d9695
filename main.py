"""
FoodOrder FastAPI Application
Main entry point: meal catalog, order intake and static assets
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import meals, orders, static

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    storage_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, NotFoundError, StorageError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("foodorder.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Report the data files on startup. Missing files are not fatal: the
    affected endpoint answers 500 until the file appears.
    """
    _logger.info(f"Starting FoodOrder in {settings.environment.value} mode")

    for label, path in (("meals", settings.meals_path), ("orders", settings.orders_path)):
        if path.is_file():
            _logger.info("Using %s file %s", label, path)
        else:
            _logger.warning("%s file %s not found", label.capitalize(), path)
    if not settings.public_dir.is_dir():
        _logger.warning("Public directory %s not found", settings.public_dir)

    try:
        yield
    finally:
        _logger.info("Shutting down FoodOrder")


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(StorageError, storage_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# API routers first; the static router's catch-all must stay last
app.include_router(meals.router)
app.include_router(orders.router)
app.include_router(static.router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
