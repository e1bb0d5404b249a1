"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from cheese_search_service.main import app
from cheese_search_service.schemas.search import SearchableRecord
from cheese_search_service.search import SearchEngine

# ============================================================================
# HTTP Client Fixtures
# ============================================================================


@pytest.fixture
def client() -> TestClient:
    """Synchronous test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client over the ASGI transport (no network)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# Data Fixtures
# ============================================================================


def make_record(record_id: str, kind: str = "cheese", **fields: Any) -> SearchableRecord:
    """Helper to create a catalog record with only the given fields populated."""
    return SearchableRecord(id=record_id, kind=kind, **fields)


@pytest.fixture
def engine() -> SearchEngine:
    """Search engine with default weights and thresholds."""
    return SearchEngine()


@pytest.fixture
def sample_records() -> list[SearchableRecord]:
    """Small mixed catalog covering every record kind the app searches."""
    return [
        make_record(
            "c1",
            title="Aged Cheddar",
            cheese_type="Cheddar",
            category="Hard",
            origin="England",
            producer="Montgomery",
            flavor=["nutty", "sharp"],
        ),
        make_record(
            "c2",
            title="Brie de Meaux",
            cheese_type="Brie",
            category="Soft",
            origin="France",
            description="Creamy bloomy rind cheese from Île-de-France",
            aroma=["mushroom", "butter"],
        ),
        make_record(
            "c3",
            kind="producer_cheese",
            title="Chevre log",
            cheese_type="Goat",
            category="Fresh",
            origin="France",
            flavor="tangy lemony",
        ),
        make_record(
            "a1",
            kind="article",
            title="How Camembert is made",
            description="A visit to a Normandy dairy",
        ),
        make_record("p1", kind="pairing", title="Sauvignon Blanc", description="Crisp white wine"),
    ]
