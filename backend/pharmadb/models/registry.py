"""Entity Registry — maps each EntityKind to its ORM model and key columns.

Invariants:
    - Every EntityKind has exactly one entry
    - Key columns are listed in the order callers pass composite keys

Design Decisions:
    - Explicit table over reflection: every kind -> model mapping visible in one place
"""

from sqlalchemy.orm import InstrumentedAttribute

from pharmadb.core.domain_types import EntityKind
from pharmadb.models.contract import Contract
from pharmadb.models.doctor import Doctor
from pharmadb.models.drug import Drug
from pharmadb.models.patient import Patient
from pharmadb.models.pharmaceutical_company import PharmaceuticalCompany
from pharmadb.models.pharmacy import Pharmacy
from pharmadb.models.pharmacy_drug import PharmacyDrug
from pharmadb.models.prescription import Prescription
from pharmadb.models.prescription_detail import PrescriptionDetail

MODELS: dict[EntityKind, type] = {
    EntityKind.PATIENT: Patient,
    EntityKind.DOCTOR: Doctor,
    EntityKind.COMPANY: PharmaceuticalCompany,
    EntityKind.PHARMACY: Pharmacy,
    EntityKind.DRUG: Drug,
    EntityKind.CONTRACT: Contract,
    EntityKind.PHARMACY_DRUG: PharmacyDrug,
    EntityKind.PRESCRIPTION: Prescription,
    EntityKind.PRESCRIPTION_DETAIL: PrescriptionDetail,
}

KEY_COLUMNS: dict[EntityKind, tuple[InstrumentedAttribute, ...]] = {
    EntityKind.PATIENT: (Patient.id,),
    EntityKind.DOCTOR: (Doctor.id,),
    EntityKind.COMPANY: (PharmaceuticalCompany.name,),
    EntityKind.PHARMACY: (Pharmacy.id,),
    EntityKind.DRUG: (Drug.id,),
    EntityKind.CONTRACT: (Contract.id,),
    EntityKind.PHARMACY_DRUG: (PharmacyDrug.pharmacy_id, PharmacyDrug.drug_id),
    EntityKind.PRESCRIPTION: (Prescription.id,),
    EntityKind.PRESCRIPTION_DETAIL: (
        PrescriptionDetail.prescription_id, PrescriptionDetail.drug_id,
    ),
}


def key_filter(kind: EntityKind, key: object) -> list:
    """WHERE clauses selecting the row identified by `key` (tuple for composite keys)."""
    columns = KEY_COLUMNS[kind]
    values = key if isinstance(key, tuple) else (key,)
    if len(values) != len(columns):
        raise ValueError(
            f"{kind.value} key needs {len(columns)} part(s), got {len(values)}",
        )
    return [column == value for column, value in zip(columns, values)]
