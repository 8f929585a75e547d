"""Fixtures for API unit tests: in-memory audit repository, AsyncClient, identity headers."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
def app_with_overrides(audit_repository):
    """App with the audit repository overridden for testing."""
    from app.api import dependencies

    app.dependency_overrides[dependencies.get_audit_repository] = lambda: audit_repository
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app. Lifespan (table creation) is not run."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def super_admin_headers():
    return {"X-User-ID": "1", "X-User-Role": "super_admin"}


@pytest.fixture
def election_admin_headers():
    return {"X-User-ID": "2", "X-User-Role": "election_admin"}


@pytest.fixture
def voter_headers():
    return {"X-User-ID": "99", "X-User-Role": "voter"}
