"""Brand color catalog — loads the paint catalog from JSON on demand.

Pure Python module. The catalog is read once per path and cached as
tuples of frozen PaintColor models, so concurrent requests share it
without copying and nothing downstream can mutate it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import structlog
from pydantic import TypeAdapter, ValidationError

from colrvia.config import settings
from colrvia.models.contracts import PaintColor

log = structlog.get_logger("catalog")

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "catalog.json"

BrandCatalog = Mapping[str, tuple[PaintColor, ...]]

_catalog_adapter = TypeAdapter(dict[str, tuple[PaintColor, ...]])

_catalog_cache: dict[Path, BrandCatalog] = {}


class CatalogLoadError(Exception):
    """Raised when the catalog file is missing or doesn't match the PaintColor shape."""


def _resolve_path(path: str | Path | None) -> Path:
    if path:
        return Path(path).resolve()
    if settings.catalog_path:
        return Path(settings.catalog_path).resolve()
    return DEFAULT_CATALOG_PATH


def load_catalog(path: str | Path | None = None) -> BrandCatalog:
    """Load and cache the brand → colors mapping.

    Resolution order: explicit *path*, then settings.catalog_path, then the
    packaged catalog. Brand order inside each list is kept as-is; it is
    used for stable tie-breaking.

    Raises:
        CatalogLoadError: If the file can't be read or fails validation.
    """
    resolved = _resolve_path(path)
    if resolved in _catalog_cache:
        return _catalog_cache[resolved]

    try:
        raw = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Could not read catalog {resolved}: {exc}") from exc

    try:
        parsed = _catalog_adapter.validate_python(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog {resolved}: {exc}") from exc

    catalog = MappingProxyType(parsed)
    _catalog_cache[resolved] = catalog
    log.info(
        "catalog_loaded",
        path=str(resolved),
        brands={brand: len(colors) for brand, colors in catalog.items()},
    )
    return catalog


def clear_caches() -> None:
    """Clear the module-level catalog cache. Used in tests."""
    _catalog_cache.clear()
