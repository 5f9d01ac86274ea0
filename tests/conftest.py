"""
pytest configuration and shared fixtures for the Fencing Division Map API tests.

Key concern: httpx's ASGITransport does not run FastAPI's lifespan, so the
dataset the app would load on startup is never loaded for us. We handle
that by:
  1. Loading the bundled seed table before every test (autouse fixture).
  2. Dropping it again afterwards so tests that unload or replace the
     table cannot leak into the next test.
  3. Resetting the export rate limiter's in-memory counters per client.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Set env vars BEFORE importing the app so Settings picks them up correctly
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture(autouse=True)
def seed_dataset():
    """Serve the bundled seed table for the duration of each test."""
    from fencemap.core.dataset import load_dataset, unload_dataset

    load_dataset()
    yield
    unload_dataset()


@pytest.fixture()
def divisions(seed_dataset):  # noqa: ARG001 — seed_dataset must run first
    from fencemap.core.dataset import dataset_store

    return dataset_store.divisions


@pytest.fixture()
def division(divisions):
    """Look up one derived division by name: division("New Jersey")."""
    by_name = {d.name: d for d in divisions}
    return by_name.__getitem__


@pytest.fixture()
async def client(seed_dataset):  # noqa: ARG001
    """
    HTTPX async test client wired to the FastAPI app.

    Usage:
        async def test_something(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    from fencemap.core.rate_limit import limiter
    from fencemap.main import app

    # Reset in-memory rate-limit counters so tests are independent.
    try:
        limiter._limiter.storage.reset()
    except Exception:
        pass  # Some storage backends don't support reset — safe to ignore.

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
