"""Palette API endpoints — thin caller around the palette engine.

Validates the questionnaire, runs generate_palette, and keeps each result
as a PaletteJob in an in-memory store keyed by job ID. Durable storage
and auth live outside this service; X-User-ID is recorded as given.
"""

import uuid
from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from colrvia.engine.generator import PaletteGenerationError, generate_palette
from colrvia.models.contracts import (
    ErrorResponse,
    GeneratePaletteRequest,
    GeneratePaletteResponse,
    PaletteJob,
)
from colrvia.utils.seed import EmptySelectionError

logger = structlog.get_logger()

router = APIRouter(tags=["palettes"])

ANONYMOUS_UID = "anon"

# In-memory job store
_palette_jobs: dict[str, PaletteJob] = {}


def _error(status: int, code: str, message: str, *, retryable: bool = False) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=ErrorResponse(error=code, message=message, retryable=retryable).model_dump(),
    )


@router.post(
    "/palettes",
    status_code=201,
    response_model=GeneratePaletteResponse,
    responses={412: {"model": ErrorResponse}},
)
async def create_palette(
    body: GeneratePaletteRequest,
    x_user_id: str | None = Header(default=None),
) -> GeneratePaletteResponse | JSONResponse:
    """Generate a palette for the submitted answers and store the job."""
    uid = x_user_id or ANONYMOUS_UID
    try:
        output = generate_palette(body.answers)
    except (PaletteGenerationError, EmptySelectionError) as exc:
        logger.warning(
            "palette_generation_failed",
            uid=uid,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(412, "failed_precondition", str(exc))

    job_id = str(uuid.uuid4())
    output = output.model_copy(update={"id": job_id})
    _palette_jobs[job_id] = PaletteJob(
        job_id=job_id,
        uid=uid,
        created_at=datetime.now(UTC),
        answers=body.answers,
        output=output,
    )
    logger.info("palette_job_stored", job_id=job_id, uid=uid, brand=output.brand)
    return GeneratePaletteResponse(palette=output)


@router.get(
    "/palettes/{job_id}",
    response_model=PaletteJob,
    responses={404: {"model": ErrorResponse}},
)
async def get_palette(job_id: str) -> PaletteJob | JSONResponse:
    job = _palette_jobs.get(job_id)
    if job is None:
        return _error(404, "palette_not_found", "Palette not found")
    return job
