"""
Shopping Cart Service Application

A single shared shopping cart exposed as a JSON API.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .core.errors import CartError
from .core.logging import setup_logging
from .database.cart import CartEngine
from .routes import cart_router
from .security.request_logger import RequestLoggingMiddleware

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Failure envelope as a JSON response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {"message": message, "statusCode": status_code},
        },
    )


async def cart_error_handler(request: Request, exc: CartError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message} ({exc.status_code})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    message = f"invalid request: {details}" if details else "invalid request"
    logger.warning(f"{request.method} {request.url.path}: {message}")
    return error_response(message, 400)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    logger.warning(f"{request.method} {request.url.path}: {message} ({exc.status_code})")
    return error_response(message, exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Details go to the log only
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal server error", 500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory.

    Each call builds an app with its own empty cart engine.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        logger.info(f"Cart API: {settings.api_prefix}/cart")
        logger.info("Docs: /docs")
        yield
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="A simple backend API for managing a shopping cart",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.cart_engine = CartEngine()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(CartError, cart_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(cart_router, prefix=settings.api_prefix.rstrip("/"))

    @app.get("/")
    async def home():
        """Service info"""
        return {
            "message": settings.app_name,
            "version": settings.version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "ok",
            "service": settings.app_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


setup_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cart_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
