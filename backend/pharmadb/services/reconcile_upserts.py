"""Upsert Reconciler — insert-or-merge writes for inventory, line items and prescription headers.

Invariants:
    - Parents are validated before any write (ReferenceNotFoundError, no partial write)
    - Inventory and line-item upserts overwrite; repeating a call leaves the same state
    - add_prescription keeps one live prescription per (patient, doctor): a strictly
      later date re-dates it and clears its line items, anything else leaves it untouched
    - Scalar violations (price <= 0, stock < 0, quantity <= 0) are left to the store's CHECKs

Design Decisions:
    - Keyed rows go through infrastructure/upsert.py (conditional writes, no read-then-branch)
    - The prescription header is locked (FOR UPDATE) while the merge plan is applied
"""

import datetime as dt
import logging
from decimal import Decimal

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import (
    DoctorId, DrugId, EntityKind, MutationOutcome, PatientId, PharmacyId,
    PrescriptionId, UpsertOutcome,
)
from pharmadb.core.enforce_references import ReferenceCheck
from pharmadb.core.mutation_result import MutationResult
from pharmadb.core.reconcile import plan_prescription_merge
from pharmadb.infrastructure.upsert import upsert_row
from pharmadb.models.pharmacy_drug import PharmacyDrug
from pharmadb.models.prescription import Prescription
from pharmadb.models.prescription_detail import PrescriptionDetail
from pharmadb.services.validate_references import ReferenceValidator

logger = logging.getLogger(__name__)


class UpsertReconciler:
    """The three insert-or-merge policies."""

    def __init__(self, db: AsyncSession, validator: ReferenceValidator):
        self.db = db
        self.validator = validator

    async def add_drug_to_pharmacy(
        self, pharmacy_id: PharmacyId, drug_id: DrugId, price: Decimal, stock: int,
    ) -> MutationResult:
        """Stock a drug at a pharmacy, replacing price and stock if already stocked."""
        await self.validator.require(
            ReferenceCheck(EntityKind.PHARMACY, pharmacy_id, "pharmacy_id"),
            ReferenceCheck(EntityKind.DRUG, drug_id, "drug_id"),
        )
        outcome = await upsert_row(
            self.db, PharmacyDrug,
            {
                "pharmacy_id": pharmacy_id, "drug_id": drug_id,
                "price": price, "stock": stock,
            },
            key_columns=("pharmacy_id", "drug_id"),
            update_columns=("price", "stock"),
        )
        return MutationResult(
            MutationOutcome.UPSERTED, (pharmacy_id, drug_id), upsert=outcome,
        )

    async def add_drug_to_prescription(
        self, prescription_id: PrescriptionId, drug_id: DrugId, quantity: int,
    ) -> MutationResult:
        """Put a drug on a prescription, replacing the quantity if already listed."""
        await self.validator.require(
            ReferenceCheck(EntityKind.PRESCRIPTION, prescription_id, "prescription_id"),
            ReferenceCheck(EntityKind.DRUG, drug_id, "drug_id"),
        )
        outcome = await upsert_row(
            self.db, PrescriptionDetail,
            {
                "prescription_id": prescription_id, "drug_id": drug_id,
                "quantity": quantity,
            },
            key_columns=("prescription_id", "drug_id"),
            update_columns=("quantity",),
        )
        return MutationResult(
            MutationOutcome.UPSERTED, (prescription_id, drug_id), upsert=outcome,
        )

    async def add_prescription(
        self, patient_id: PatientId, doctor_id: DoctorId, date: dt.date,
    ) -> MutationResult:
        """Find-or-create the live prescription of (patient, doctor) for `date`."""
        await self.validator.require(
            ReferenceCheck(EntityKind.PATIENT, patient_id, "patient_id"),
            ReferenceCheck(EntityKind.DOCTOR, doctor_id, "doctor_id"),
        )
        live = (await self.db.execute(
            select(Prescription.id, Prescription.date)
            .where(
                Prescription.patient_id == patient_id,
                Prescription.doctor_id == doctor_id,
            )
            .order_by(Prescription.date.desc(), Prescription.id.desc())
            .limit(1)
            .with_for_update()
        )).first()

        plan = plan_prescription_merge(live.date if live else None, date)

        if plan.outcome is UpsertOutcome.INSERTED:
            prescription = Prescription(
                patient_id=patient_id, doctor_id=doctor_id, date=plan.store_date,
            )
            self.db.add(prescription)
            await self.db.flush()
            return MutationResult(
                MutationOutcome.UPSERTED, prescription.id, upsert=plan.outcome,
            )

        if plan.outcome is UpsertOutcome.UNCHANGED:
            return MutationResult(
                MutationOutcome.UPSERTED, live.id, affected_rows=0,
                upsert=plan.outcome,
            )

        cleared = 0
        if plan.clear_details:
            cleared = (await self.db.execute(
                delete(PrescriptionDetail)
                .where(PrescriptionDetail.prescription_id == live.id)
                .execution_options(synchronize_session=False)
            )).rowcount
        await self.db.execute(
            update(Prescription)
            .where(Prescription.id == live.id)
            .values(date=plan.store_date)
            .execution_options(synchronize_session=False)
        )
        logger.info(
            f"Prescription {live.id} re-dated {live.date} -> {plan.store_date}, "
            f"{cleared} line item(s) cleared",
            extra={"entity": EntityKind.PRESCRIPTION.value, "key": str(live.id)},
        )
        return MutationResult(
            MutationOutcome.UPSERTED, live.id, affected_rows=1 + cleared,
            upsert=plan.outcome,
        )
