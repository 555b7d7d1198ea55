"""API test fixtures — FastAPI app over the in-memory test store.

Invariants:
    - get_db_manager and get_db are overridden; the lifespan never runs
    - The module-level db_manager is patched for the readiness check
"""

import pytest
from httpx import ASGITransport, AsyncClient

import pharmadb.infrastructure.database as db_module
from pharmadb.infrastructure.database import get_db, get_db_manager
from pharmadb.main import app


@pytest.fixture
async def client(db_manager, monkeypatch):
    """FastAPI test client with DB dependencies overridden."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setattr(db_module, "db_manager", db_manager)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
