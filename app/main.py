from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from slowapi.middleware import SlowAPIMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

import logging
import time

from app.core.config import Settings, settings as default_settings
from app.core.logger import setup_logging
from app.database.db import (
    check_connection,
    create_db_engine,
    create_session_factory,
    init_models,
)
from app.routers.api import api_books

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
NOT_FOUND_MESSAGE = "The Resource You Are Looking For Is Not Found"

tags_metadata = [
    {"name": "default", "description": "Service health"},
    {"name": "Books (API)", "description": "Books and reading progress"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the connection pool for the lifetime of the application"""
    settings: Settings = app.state.settings
    # Startup
    logger.info(f"🚀 {settings.APP_NAME} starting up...")
    logger.info(f"📊 Debug mode: {settings.DEBUG}")
    logger.info(f"🔐 CORS origins: {settings.cors_origins}")

    engine = create_db_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    if await check_connection(engine) and settings.DB_CREATE_TABLES:
        await init_models(engine)
        logger.info("📚 Tables are ready")

    yield

    # Shutdown
    logger.info(f"🛑 {settings.APP_NAME} shutting down...")
    await engine.dispose()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        content = {"message": NOT_FOUND_MESSAGE}
    elif isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        message = "Invalid book ID"
    elif request.url.path.rstrip("/").endswith("/progress"):
        message = "Invalid progress data"
    else:
        message = "Invalid book data"
    logger.info(f"⚠️ {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"message": message, "error": jsonable_encoder(errors)},
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"⏳ Rate limit exceeded for {get_remote_address(request)}")
    return JSONResponse(
        status_code=429,
        content={"message": "Too Many Requests", "error": str(exc.detail)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"💥 Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Books and reading progress tracker",
        version=VERSION,
        openapi_tags=tags_metadata,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Rate limiter
    app.state.limiter = Limiter(
        key_func=get_remote_address, default_limits=[settings.RATE_LIMIT]
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
        expose_headers=settings.cors_expose_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} {status_code} {elapsed:.1f}ms")

    @app.get("/health", tags=["default"])
    async def health_check():
        """API health"""
        return {"status": "healthy", "app": settings.APP_NAME, "version": VERSION}

    app.include_router(api_books.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=default_settings.PORT)

# uvicorn app.main:app --reload
