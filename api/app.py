"""
FastAPI application factory: middleware, exception handlers, lifecycle.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router, SERVICE_NAME, SERVICE_VERSION
from config import settings
from models import ErrorResponse
from utils.errors import FetchError, MissingInput
from utils.http_client import http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("[API] Service starting up...")
    try:
        yield
    finally:
        await http_client.close()
        logger.info("[API] HTTP session closed")


async def handle_missing_input(request: Request, exc: MissingInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": MissingInput.error})


async def handle_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"[API] Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": "Expected JSON like {\"url\": \"...\"}"},
    )


async def handle_fetch_error(request: Request, exc: FetchError) -> JSONResponse:
    logger.warning(f"[API] Fetch failed for {exc.url}: {exc.error} ({exc.debug_info})")
    body = ErrorResponse(error=exc.error, details=exc.details, debug_info=exc.debug_info)
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


def create_app() -> FastAPI:
    """Build the application with routes, CORS and request logging."""
    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"[API] {request.method} {request.url.path} -> 500 ({elapsed_ms:.0f} ms): {e!r}"
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[API] {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f} ms)"
        )
        return response

    app.add_exception_handler(MissingInput, handle_missing_input)
    app.add_exception_handler(RequestValidationError, handle_invalid_body)
    app.add_exception_handler(FetchError, handle_fetch_error)

    app.include_router(router)
    return app


app = create_app()
