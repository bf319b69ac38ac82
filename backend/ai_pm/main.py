"""
AI PM Backend - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from . import __version__
from .config import Settings, get_settings
from .errors import AIPMError
from .routes import generate_router, checklists_router, health_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "Invalid request body - " + "; ".join(parts)


async def aipm_error_handler(request: Request, exc: AIPMError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _format_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        logger.info("Starting AI PM Backend...")
        logger.info(f"Groq API URL: {settings.groq_api_url}")
        logger.info(f"Groq API Key configured: {'Yes' if settings.api_key_configured else 'No'}")
        if not settings.api_key_configured:
            logger.warning("Running in degraded mode - checklists fall back to the sample template")

        yield

        logger.info("Shutting down AI PM Backend...")

    app = FastAPI(
        title="AI PM API",
        description="LLM relay with ethical AI checklist generation",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AIPMError, aipm_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(generate_router)
    app.include_router(checklists_router)

    app.state.settings = settings

    return app


configure_logging(get_settings())
app = create_app()
