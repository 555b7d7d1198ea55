"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Natural keys (patient/doctor national IDs, company name) are str
    - Generated keys (pharmacy, drug, contract, prescription) are int
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PatientId = NewType("PatientId", str)
DoctorId = NewType("DoctorId", str)
CompanyName = NewType("CompanyName", str)
PharmacyId = NewType("PharmacyId", int)
DrugId = NewType("DrugId", int)
ContractId = NewType("ContractId", int)
PrescriptionId = NewType("PrescriptionId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Every persisted entity, including the two association tables."""
    PATIENT = "patient"
    DOCTOR = "doctor"
    COMPANY = "pharmaceutical_company"
    PHARMACY = "pharmacy"
    DRUG = "drug"
    CONTRACT = "contract"
    PHARMACY_DRUG = "pharmacy_drug"
    PRESCRIPTION = "prescription"
    PRESCRIPTION_DETAIL = "prescription_detail"


class UpsertOutcome(str, Enum):
    """Tagged result of an insert-or-merge write."""
    INSERTED = "inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class MutationOutcome(str, Enum):
    """What a committed mutation did to its target row."""
    CREATED = "created"
    UPSERTED = "upserted"
    UPDATED = "updated"
    DELETED = "deleted"


class MutationState(str, Enum):
    """Lifecycle of one Mutation API call.

    Validating -> Writing -> Committed
    Validating -> Rejected
    Writing -> Failed
    """
    VALIDATING = "validating"
    WRITING = "writing"
    COMMITTED = "committed"
    REJECTED = "rejected"
    FAILED = "failed"
