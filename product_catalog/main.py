from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_catalog.api.routes import router
from product_catalog.core.config import settings
from product_catalog.core.errors import CatalogError, ValidationError
from product_catalog.core.logging import configure_logging, get_logger
from product_catalog.middlewares.request_id import RequestIdMiddleware, internal_error_response

configure_logging(settings.log_level)
logger = get_logger(__name__)

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(RequestIdMiddleware)

# Browser client (allowlist from CORS_ALLOWED_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "X-Request-Id"],
    expose_headers=["X-Request-Id"],
)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


def _error(request: Request, status_code: int, error: str, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "requestId": _request_id(request)},
        headers=headers,
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message, "errors": exc.errors})


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        # Internal consistency problem: details stay in the logs.
        logger.error("Catalog error: %s", exc.message, extra={"requestId": _request_id(request)})
        return _error(request, 500, "internal_server_error", "Unexpected error")
    return _error(request, exc.status_code, exc.code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    code = "not_found" if exc.status_code == 404 else "http_error"
    return _error(request, exc.status_code, code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Reached only for errors raised outside RequestIdMiddleware.
    logger.exception("Unhandled exception", extra={"requestId": _request_id(request)})
    return internal_error_response(_request_id(request))


@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": settings.app_name,
        "env": settings.environment,
        "version": settings.app_version,
    }


app.include_router(router)

logger.info(
    "product-catalog-api started",
    extra={"env": settings.environment, "corsOrigins": settings.cors_origins_list()},
)
