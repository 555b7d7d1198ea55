"""Invariant Guard — a doctor keeps at least one patient.

Tests cover:
    - D1 with P1 and P2: deleting P1 succeeds, then deleting P2 is rejected
    - A rejected deletion leaves every row in place
    - can_delete_patient mirrors the verdict without writing
    - Doctors referenced by patients cannot be deleted; unreferenced ones can
    - Reassigning a patient's physician is not guarded
"""

import pytest

from pharmadb.core.enforce_invariants import DOCTOR_HAS_PATIENTS, DOCTOR_RETAINS_PATIENT
from pharmadb.core.errors import InvariantViolationError, NotFoundError
from pharmadb.models.doctor import Doctor
from pharmadb.models.patient import Patient
from pharmadb.services.guard_invariants import InvariantGuard


async def test_last_patient_of_doctor_cannot_be_deleted(api, store, world):
    result = await api.execute("delete_patient", patient_id="P1")
    assert result.affected_rows == 1
    assert await store.get(Patient, "P1") is None

    with pytest.raises(InvariantViolationError) as exc:
        await api.execute("delete_patient", patient_id="P2")
    assert exc.value.rule == DOCTOR_RETAINS_PATIENT
    assert await store.get(Patient, "P2") is not None


async def test_sole_patient_rejected_immediately(api, store, world):
    with pytest.raises(InvariantViolationError):
        await api.execute("delete_patient", patient_id="P3")
    assert await store.count(Patient, Patient.doctor_id == "D2") == 1


async def test_can_delete_patient_reports_without_writing(db_manager, store, world):
    async with db_manager.unit_of_work() as db:
        guard = InvariantGuard(db)
        assert await guard.can_delete_patient("P1") is True
        assert await guard.can_delete_patient("P3") is False
    assert await store.count(Patient) == 3


async def test_missing_patient_reports_not_found(api, world):
    with pytest.raises(NotFoundError):
        await api.execute("delete_patient", patient_id="P404")


async def test_doctor_with_patients_cannot_be_deleted(api, store, world):
    with pytest.raises(InvariantViolationError) as exc:
        await api.execute("delete_doctor", doctor_id="D1")
    assert exc.value.rule == DOCTOR_HAS_PATIENTS
    assert await store.get(Doctor, "D1") is not None


async def test_doctor_without_patients_can_be_deleted(api, store, world):
    await api.execute(
        "add_doctor", doctor_id="D3", name="Dr. Three",
        specialty="Oncology", years_of_experience=1,
    )
    result = await api.execute("delete_doctor", doctor_id="D3")
    assert result.affected_rows == 1
    assert await store.get(Doctor, "D3") is None


async def test_reassigning_physician_is_not_guarded(api, store, world):
    # D2 loses its only patient; only deletions are guarded
    await api.execute(
        "update_patient", patient_id="P3", name="Patient P3",
        address="1 Main St", age=40, doctor_id="D1",
    )
    assert await store.count(Patient, Patient.doctor_id == "D2") == 0
    assert (await store.get(Patient, "P3")).doctor_id == "D1"
