"""Prescription Handlers — prescription headers and their line items.

Invariants:
    - add_prescription is find-or-create per (patient, doctor) (see services/reconcile_upserts.py)
    - update_prescription validates patient and doctor before writing
    - delete_prescription removes line items first, then the header
"""

import datetime as dt

from pharmadb.core.domain_types import (
    DoctorId, DrugId, EntityKind, MutationOutcome, PatientId, PrescriptionId,
)
from pharmadb.core.enforce_references import ReferenceCheck
from pharmadb.core.mutation_result import MutationResult
from pharmadb.services.mutation_context import MutationContext
from pharmadb.services.write_rows import update_row


class PrescriptionHandlers:
    """Prescription and prescription-detail mutations."""

    def __init__(self, ctx: MutationContext):
        self.ctx = ctx

    async def add_prescription(
        self, patient_id: PatientId, doctor_id: DoctorId, date: dt.date,
    ) -> MutationResult:
        return await self.ctx.reconciler.add_prescription(patient_id, doctor_id, date)

    async def update_prescription(
        self, prescription_id: PrescriptionId, patient_id: PatientId,
        doctor_id: DoctorId, date: dt.date,
    ) -> MutationResult:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.PATIENT, patient_id, "patient_id"),
            ReferenceCheck(EntityKind.DOCTOR, doctor_id, "doctor_id"),
        )
        return await update_row(
            self.ctx.db, EntityKind.PRESCRIPTION, prescription_id,
            {"patient_id": patient_id, "doctor_id": doctor_id, "date": date},
        )

    async def delete_prescription(self, prescription_id: PrescriptionId) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(
            EntityKind.PRESCRIPTION, prescription_id,
        )
        return MutationResult(MutationOutcome.DELETED, prescription_id, removed)

    async def add_drug_to_prescription(
        self, prescription_id: PrescriptionId, drug_id: DrugId, quantity: int,
    ) -> MutationResult:
        return await self.ctx.reconciler.add_drug_to_prescription(
            prescription_id, drug_id, quantity,
        )

    async def update_prescription_detail(
        self, prescription_id: PrescriptionId, drug_id: DrugId, quantity: int,
    ) -> MutationResult:
        return await update_row(
            self.ctx.db, EntityKind.PRESCRIPTION_DETAIL, (prescription_id, drug_id),
            {"quantity": quantity},
        )

    async def delete_prescription_detail(
        self, prescription_id: PrescriptionId, drug_id: DrugId,
    ) -> MutationResult:
        key = (prescription_id, drug_id)
        removed = await self.ctx.orchestrator.delete(EntityKind.PRESCRIPTION_DETAIL, key)
        return MutationResult(MutationOutcome.DELETED, key, removed)
