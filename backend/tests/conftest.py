"""Shared fixtures: in-process ASGI client and catalog cache reset."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from colrvia.engine import catalog as catalog_mod
from colrvia.main import app


@pytest_asyncio.fixture
async def client():
    """httpx client bound to the FastAPI app (no server process)."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture(autouse=True)
def _fresh_catalog_cache():
    catalog_mod.clear_caches()
    yield
    catalog_mod.clear_caches()
