"""Reports — read-only projections over the entity store.

Invariants:
    - No method writes, locks, or branches on invariants
    - Every method is a single SELECT; results are plain dicts ready for JSON

Design Decisions:
    - Outer joins for counts so entities with nothing attached still appear with 0
"""

import datetime as dt

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import CompanyName, DoctorId, PatientId, PharmacyId
from pharmadb.models.contract import Contract
from pharmadb.models.doctor import Doctor
from pharmadb.models.drug import Drug
from pharmadb.models.patient import Patient
from pharmadb.models.pharmacy_drug import PharmacyDrug
from pharmadb.models.prescription import Prescription
from pharmadb.models.prescription_detail import PrescriptionDetail


class ReportService:
    """The six reporting reads."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def patient_prescriptions(
        self, patient_id: PatientId, start: dt.date, end: dt.date,
    ) -> list[dict]:
        """Prescriptions of a patient dated within [start, end], oldest first."""
        result = await self.db.execute(
            select(
                Prescription.id, Prescription.date,
                Doctor.id.label("doctor_id"), Doctor.name.label("doctor_name"),
            )
            .join(Doctor, Doctor.id == Prescription.doctor_id)
            .where(
                Prescription.patient_id == patient_id,
                Prescription.date.between(start, end),
            )
            .order_by(Prescription.date, Prescription.id)
        )
        return [
            {
                "prescription_id": row.id,
                "date": row.date.isoformat(),
                "doctor_id": row.doctor_id,
                "doctor_name": row.doctor_name,
            }
            for row in result
        ]

    async def prescription_details(
        self, patient_id: PatientId, date: dt.date,
    ) -> list[dict]:
        """Line items of every prescription the patient received on `date`."""
        result = await self.db.execute(
            select(
                Prescription.id, Prescription.doctor_id,
                Drug.id.label("drug_id"), Drug.trade_name,
                PrescriptionDetail.quantity,
            )
            .join(
                PrescriptionDetail,
                PrescriptionDetail.prescription_id == Prescription.id,
            )
            .join(Drug, Drug.id == PrescriptionDetail.drug_id)
            .where(
                Prescription.patient_id == patient_id,
                Prescription.date == date,
            )
            .order_by(Prescription.id, Drug.trade_name)
        )
        return [
            {
                "prescription_id": row.id,
                "doctor_id": row.doctor_id,
                "drug_id": row.drug_id,
                "trade_name": row.trade_name,
                "quantity": row.quantity,
            }
            for row in result
        ]

    async def company_catalog(self, company_name: CompanyName) -> list[dict]:
        """Drugs of a company with the number of pharmacies stocking each."""
        result = await self.db.execute(
            select(
                Drug.id, Drug.trade_name, Drug.formula,
                func.count(PharmacyDrug.pharmacy_id).label("pharmacy_count"),
            )
            .outerjoin(PharmacyDrug, PharmacyDrug.drug_id == Drug.id)
            .where(Drug.company_name == company_name)
            .group_by(Drug.id, Drug.trade_name, Drug.formula)
            .order_by(Drug.trade_name)
        )
        return [
            {
                "drug_id": row.id,
                "trade_name": row.trade_name,
                "formula": row.formula,
                "pharmacy_count": row.pharmacy_count,
            }
            for row in result
        ]

    async def pharmacy_stock(self, pharmacy_id: PharmacyId) -> list[dict]:
        """Inventory of a pharmacy with prices and owning companies."""
        result = await self.db.execute(
            select(
                Drug.id, Drug.trade_name, Drug.company_name,
                PharmacyDrug.price, PharmacyDrug.stock,
            )
            .join(PharmacyDrug, PharmacyDrug.drug_id == Drug.id)
            .where(PharmacyDrug.pharmacy_id == pharmacy_id)
            .order_by(Drug.trade_name)
        )
        return [
            {
                "drug_id": row.id,
                "trade_name": row.trade_name,
                "company_name": row.company_name,
                "price": str(row.price),
                "stock": row.stock,
            }
            for row in result
        ]

    async def contracts_between(
        self, pharmacy_id: PharmacyId, company_name: CompanyName,
    ) -> list[dict]:
        """Contracts linking one pharmacy and one company, by start date."""
        result = await self.db.execute(
            select(Contract)
            .where(
                Contract.pharmacy_id == pharmacy_id,
                Contract.company_name == company_name,
            )
            .order_by(Contract.start_date, Contract.id)
        )
        return [
            {
                "contract_id": c.id,
                "start_date": c.start_date.isoformat(),
                "end_date": c.end_date.isoformat(),
                "content": c.content,
                "supervisor": c.supervisor,
            }
            for c in result.scalars()
        ]

    async def doctor_patients(self, doctor_id: DoctorId) -> list[dict]:
        """Patients of a doctor with how many prescriptions that doctor wrote them."""
        result = await self.db.execute(
            select(
                Patient.id, Patient.name, Patient.age,
                func.count(Prescription.id).label("prescription_count"),
            )
            .outerjoin(
                Prescription,
                (Prescription.patient_id == Patient.id)
                & (Prescription.doctor_id == Patient.doctor_id),
            )
            .where(Patient.doctor_id == doctor_id)
            .group_by(Patient.id, Patient.name, Patient.age)
            .order_by(Patient.name)
        )
        return [
            {
                "patient_id": row.id,
                "name": row.name,
                "age": row.age,
                "prescription_count": row.prescription_count,
            }
            for row in result
        ]
