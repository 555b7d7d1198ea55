"""People Handlers — patients and doctors.

Invariants:
    - add/update_patient validate the physician reference first
    - delete_patient goes through the Invariant Guard (via the Cascade Orchestrator)
    - delete_doctor is blocked while any patient names the doctor as physician
    - Reassigning a patient's physician is not guarded (only deletion is)
"""

from pharmadb.core.domain_types import (
    DoctorId, EntityKind, MutationOutcome, PatientId,
)
from pharmadb.core.enforce_references import ReferenceCheck
from pharmadb.core.mutation_result import MutationResult
from pharmadb.models.doctor import Doctor
from pharmadb.models.patient import Patient
from pharmadb.services.mutation_context import MutationContext
from pharmadb.services.write_rows import insert_row, update_row


class PeopleHandlers:
    """Patient and doctor mutations."""

    def __init__(self, ctx: MutationContext):
        self.ctx = ctx

    async def add_doctor(
        self, doctor_id: DoctorId, name: str, specialty: str, years_of_experience: int,
    ) -> MutationResult:
        await insert_row(self.ctx.db, Doctor(
            id=doctor_id, name=name, specialty=specialty,
            years_of_experience=years_of_experience,
        ))
        return MutationResult(MutationOutcome.CREATED, doctor_id)

    async def update_doctor(
        self, doctor_id: DoctorId, name: str, specialty: str, years_of_experience: int,
    ) -> MutationResult:
        return await update_row(self.ctx.db, EntityKind.DOCTOR, doctor_id, {
            "name": name, "specialty": specialty,
            "years_of_experience": years_of_experience,
        })

    async def delete_doctor(self, doctor_id: DoctorId) -> MutationResult:
        await self.ctx.guard.ensure_doctor_deletable(doctor_id)
        removed = await self.ctx.orchestrator.delete(EntityKind.DOCTOR, doctor_id)
        return MutationResult(MutationOutcome.DELETED, doctor_id, removed)

    async def add_patient(
        self, patient_id: PatientId, name: str, address: str, age: int, doctor_id: DoctorId,
    ) -> MutationResult:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.DOCTOR, doctor_id, "doctor_id"),
        )
        await insert_row(self.ctx.db, Patient(
            id=patient_id, name=name, address=address, age=age,
            doctor_id=doctor_id,
        ))
        return MutationResult(MutationOutcome.CREATED, patient_id)

    async def update_patient(
        self, patient_id: PatientId, name: str, address: str, age: int, doctor_id: DoctorId,
    ) -> MutationResult:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.DOCTOR, doctor_id, "doctor_id"),
        )
        return await update_row(self.ctx.db, EntityKind.PATIENT, patient_id, {
            "name": name, "address": address, "age": age, "doctor_id": doctor_id,
        })

    async def delete_patient(self, patient_id: PatientId) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(EntityKind.PATIENT, patient_id)
        return MutationResult(MutationOutcome.DELETED, patient_id, removed)
