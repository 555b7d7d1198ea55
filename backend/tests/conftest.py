"""Shared test fixtures — in-memory SQLite store, Mutation API, store reader.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - Mutations go through MutationAPI (one unit of work per call)
    - Assertions read through fresh sessions, never through a mutation's session

Design Decisions:
    - StaticPool: one shared connection so every session sees the same :memory: database
    - SQLite ignores FOR UPDATE; guard tests cover the verdicts, not lock contention
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import datetime as dt  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import pharmadb.models  # noqa: E402,F401
from pharmadb.db.base import Base  # noqa: E402
from pharmadb.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys,
)
from pharmadb.services.mutation_api import MutationAPI  # noqa: E402


class StoreReader:
    """Read-only helper: each call opens its own session."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, model, key):
        async with self._manager.session() as s:
            return await s.get(model, key)

    async def count(self, model, *criteria) -> int:
        async with self._manager.session() as s:
            query = select(func.count()).select_from(model)
            if criteria:
                query = query.where(*criteria)
            return await s.scalar(query)

    async def all(self, model, *criteria) -> list:
        async with self._manager.session() as s:
            query = select(model)
            if criteria:
                query = query.where(*criteria)
            return list((await s.execute(query)).scalars())


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def api(db_manager):
    return MutationAPI(db_manager)


@pytest.fixture
def store(db_manager):
    return StoreReader(db_manager)


@pytest.fixture
async def world(api):
    """A small consistent dataset most integration tests start from.

    D1 treats P1 and P2; D2 treats P3 (alone). Acme makes drug A and B,
    Globex makes drug C. One pharmacy stocks A and B and has one contract
    with each company.
    """
    await api.execute(
        "add_doctor", doctor_id="D1", name="Dr. One",
        specialty="Cardiology", years_of_experience=10,
    )
    await api.execute(
        "add_doctor", doctor_id="D2", name="Dr. Two",
        specialty="Dermatology", years_of_experience=3,
    )
    for patient_id, doctor_id in (("P1", "D1"), ("P2", "D1"), ("P3", "D2")):
        await api.execute(
            "add_patient", patient_id=patient_id, name=f"Patient {patient_id}",
            address="1 Main St", age=40, doctor_id=doctor_id,
        )
    await api.execute("add_pharmaceutical_company", name="Acme", phone="555-0100")
    await api.execute("add_pharmaceutical_company", name="Globex", phone="555-0200")
    drug_a = (await api.execute(
        "add_drug", trade_name="Aspirin", formula="C9H8O4", company_name="Acme",
    )).key
    drug_b = (await api.execute(
        "add_drug", trade_name="Bufferin", formula="C9H8O4+MgO", company_name="Acme",
    )).key
    drug_c = (await api.execute(
        "add_drug", trade_name="Cetirizine", formula="C21H25ClN2O3", company_name="Globex",
    )).key
    pharmacy = (await api.execute(
        "add_pharmacy", name="Corner Pharmacy", address="2 Side St", phone="555-0300",
    )).key
    for drug_id in (drug_a, drug_b):
        await api.execute(
            "add_drug_to_pharmacy", pharmacy_id=pharmacy, drug_id=drug_id,
            price=Decimal("9.99"), stock=10,
        )
    contracts = []
    for company in ("Acme", "Globex"):
        contracts.append((await api.execute(
            "add_contract", pharmacy_id=pharmacy, company_name=company,
            start_date=dt.date(2024, 1, 1), end_date=dt.date(2025, 1, 1),
            content="Supply agreement", supervisor="Sam Supervisor",
        )).key)
    return {
        "drug_a": drug_a, "drug_b": drug_b, "drug_c": drug_c,
        "pharmacy": pharmacy, "contracts": contracts,
    }
