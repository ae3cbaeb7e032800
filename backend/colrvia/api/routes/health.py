"""Health check endpoint.

Always returns 200 so load balancers keep routing; catalog problems show
up as catalog="unavailable" rather than an error status.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from colrvia.config import settings
from colrvia.engine.catalog import CatalogLoadError, load_catalog

logger = structlog.get_logger()

router = APIRouter(tags=["health"])

VERSION = "0.1.0"


def _catalog_status() -> tuple[str, dict[str, int]]:
    try:
        catalog = load_catalog()
    except CatalogLoadError as exc:
        logger.warning("health_catalog_failed", error=str(exc))
        return "unavailable", {}
    return "loaded", {brand: len(colors) for brand, colors in catalog.items()}


@router.get("/health")
async def health_check() -> dict:
    """Confirm the API process is alive and the catalog is readable."""
    catalog, brands = _catalog_status()
    return {
        "status": "ok",
        "version": VERSION,
        "environment": settings.environment,
        "catalog": catalog,
        "brands": brands,
    }
