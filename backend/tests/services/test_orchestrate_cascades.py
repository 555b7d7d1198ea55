"""Cascade Orchestrator — parents are removed together with their children, atomically.

Tests cover:
    - Pharmacy deletion removes its inventory rows and contracts (affected = N + M + 1)
    - Deleting a missing pharmacy is NotFound and leaves every row intact
    - Company deletion removes contracts (orchestrated) plus drugs and their inventory (FK)
    - Drug deletion removes inventory and line items through the store
    - Prescription deletion removes line items first
    - Deleting a patient or doctor still referenced by a prescription is a constraint violation
"""

import datetime as dt

import pytest

from pharmadb.core.errors import ConstraintViolationError, NotFoundError
from pharmadb.models.contract import Contract
from pharmadb.models.drug import Drug
from pharmadb.models.patient import Patient
from pharmadb.models.pharmaceutical_company import PharmaceuticalCompany
from pharmadb.models.pharmacy import Pharmacy
from pharmadb.models.pharmacy_drug import PharmacyDrug
from pharmadb.models.prescription import Prescription
from pharmadb.models.prescription_detail import PrescriptionDetail


async def test_pharmacy_deletion_removes_inventory_and_contracts(api, store, world):
    result = await api.execute("delete_pharmacy", pharmacy_id=world["pharmacy"])
    assert result.affected_rows == 2 + 2 + 1
    assert await store.get(Pharmacy, world["pharmacy"]) is None
    assert await store.count(PharmacyDrug) == 0
    assert await store.count(Contract) == 0


async def test_missing_pharmacy_is_not_found_and_nothing_removed(api, store, world):
    with pytest.raises(NotFoundError) as exc:
        await api.execute("delete_pharmacy", pharmacy_id=999)
    assert exc.value.entity == "pharmacy"
    assert await store.count(PharmacyDrug) == 2
    assert await store.count(Contract) == 2


async def test_company_deletion_cascades(api, store, world):
    result = await api.execute("delete_pharmaceutical_company", name="Acme")
    # One contract (orchestrated) + the company; drugs go via FK
    assert result.affected_rows == 2
    assert await store.get(PharmaceuticalCompany, "Acme") is None
    assert await store.count(Drug, Drug.company_name == "Acme") == 0
    assert await store.count(PharmacyDrug) == 0
    assert await store.count(Contract) == 1
    assert await store.get(Drug, world["drug_c"]) is not None


async def test_drug_deletion_removes_inventory_and_line_items(api, store, world):
    prescription = (await api.execute(
        "add_prescription", patient_id="P1", doctor_id="D1", date=dt.date(2024, 2, 1),
    )).key
    await api.execute(
        "add_drug_to_prescription", prescription_id=prescription,
        drug_id=world["drug_a"], quantity=1,
    )
    await api.execute("delete_drug", drug_id=world["drug_a"])
    assert await store.count(PharmacyDrug, PharmacyDrug.drug_id == world["drug_a"]) == 0
    assert await store.count(PrescriptionDetail) == 0
    assert await store.get(Prescription, prescription) is not None


async def test_prescription_deletion_removes_line_items(api, store, world):
    prescription = (await api.execute(
        "add_prescription", patient_id="P1", doctor_id="D1", date=dt.date(2024, 2, 1),
    )).key
    for drug in ("drug_a", "drug_c"):
        await api.execute(
            "add_drug_to_prescription", prescription_id=prescription,
            drug_id=world[drug], quantity=1,
        )
    result = await api.execute("delete_prescription", prescription_id=prescription)
    assert result.affected_rows == 3
    assert await store.count(PrescriptionDetail) == 0
    assert await store.count(Prescription) == 0


async def test_missing_prescription_detail_is_not_found(api, world):
    with pytest.raises(NotFoundError):
        await api.execute(
            "delete_prescription_detail", prescription_id=1, drug_id=world["drug_a"],
        )


async def test_patient_with_prescriptions_is_protected(api, store, world):
    await api.execute(
        "add_prescription", patient_id="P1", doctor_id="D1", date=dt.date(2024, 2, 1),
    )
    with pytest.raises(ConstraintViolationError):
        await api.execute("delete_patient", patient_id="P1")
    assert await store.get(Patient, "P1") is not None


async def test_contract_deletion_is_unconditional(api, store, world):
    contract = world["contracts"][0]
    result = await api.execute("delete_contract", contract_id=contract)
    assert result.affected_rows == 1
    assert await store.get(Contract, contract) is None
