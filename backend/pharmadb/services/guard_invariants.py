"""Invariant Guard — evaluates cross-row structural rules inside the deleting transaction.

Invariants:
    - The doctor's row is locked (SELECT ... FOR UPDATE) before patients are counted,
      so two concurrent deletions of the same doctor's patients serialize
    - The check and the delete share one transaction: nothing can change between them
    - A missing patient passes the guard (the delete then reports NotFound)

Design Decisions:
    - Verdicts rendered by core/enforce_invariants.py; this class only gathers counts
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import DoctorId, PatientId
from pharmadb.core.enforce_invariants import (
    check_doctor_retains_patient, check_doctor_unreferenced,
)
from pharmadb.core.errors import InvariantViolationError
from pharmadb.models.doctor import Doctor
from pharmadb.models.patient import Patient

logger = logging.getLogger(__name__)


class InvariantGuard:
    """Doctor/patient coverage rules."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _lock_doctor(self, doctor_id: DoctorId) -> None:
        await self.db.execute(
            select(Doctor.id).where(Doctor.id == doctor_id).with_for_update(),
        )

    async def _count_patients(
        self, doctor_id: DoctorId, excluding: PatientId | None = None,
    ) -> int:
        query = (
            select(func.count())
            .select_from(Patient)
            .where(Patient.doctor_id == doctor_id)
        )
        if excluding is not None:
            query = query.where(Patient.id != excluding)
        return await self.db.scalar(query) or 0

    async def check_patient_deletion(
        self, patient_id: PatientId,
    ) -> InvariantViolationError | None:
        """Return the violation deleting `patient_id` would cause, if any."""
        doctor_id = await self.db.scalar(
            select(Patient.doctor_id).where(Patient.id == patient_id),
        )
        if doctor_id is None:
            return None
        await self._lock_doctor(doctor_id)
        remaining = await self._count_patients(doctor_id, excluding=patient_id)
        return check_doctor_retains_patient(doctor_id, patient_id, remaining)

    async def can_delete_patient(self, patient_id: PatientId) -> bool:
        return await self.check_patient_deletion(patient_id) is None

    async def ensure_patient_deletable(self, patient_id: PatientId) -> None:
        error = await self.check_patient_deletion(patient_id)
        if error:
            logger.info(f"Guard rejected patient deletion: {error.message}")
            raise error

    async def ensure_doctor_deletable(self, doctor_id: DoctorId) -> None:
        """Block deleting a doctor that is still some patient's physician."""
        await self._lock_doctor(doctor_id)
        error = check_doctor_unreferenced(
            doctor_id, await self._count_patients(doctor_id),
        )
        if error:
            logger.info(f"Guard rejected doctor deletion: {error.message}")
            raise error
