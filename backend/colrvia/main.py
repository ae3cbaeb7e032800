import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from colrvia.api.routes import health, palettes
from colrvia.api.routes.health import VERSION
from colrvia.logging import configure_logging

configure_logging()

logger = structlog.get_logger()

app = FastAPI(
    title="Colrvia Palette API",
    version=VERSION,
    docs_url="/docs",
    redoc_url=None,
)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", request.headers.get("X-Request-ID", ""))


def _field_path(loc: tuple[int | str, ...]) -> str:
    """Render an error location the way the questionnaire client names fields.

    ("body", "answers", "moodWords", 3) -> "answers.moodWords[3]"
    """
    path = ""
    for part in loc[1:] if loc and loc[0] == "body" else loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Attach a request ID to every request and echo it in X-Request-ID.

    The ID is bound into structlog context vars so every log line for the
    request carries it.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Return ErrorResponse JSON for questionnaire validation errors.

    FastAPI's default 422 body is {"detail": [...]}; clients expect the
    single ErrorResponse shape for every failure.
    """
    errors = exc.errors()
    fields = [_field_path(err["loc"]) for err in errors]
    messages = [f"{field}: {err['msg']}" for field, err in zip(fields, errors)]
    logger.info("request_validation_failed", path=request.url.path, fields=fields)
    response = JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "message": "; ".join(messages),
            "retryable": False,
        },
    )
    response.headers["X-Request-ID"] = _request_id(request)
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return ErrorResponse JSON instead of a bare 500 page."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    response = JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "retryable": True,
        },
    )
    response.headers["X-Request-ID"] = _request_id(request)
    return response


app.include_router(health.router)
app.include_router(palettes.router, prefix="/api/v1")
