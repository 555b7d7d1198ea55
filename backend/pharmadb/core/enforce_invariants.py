"""Invariant Enforcement — structural rules that span rows.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A doctor keeps at least one patient when a patient is deleted
    - A doctor referenced by patients is never deleted (dangling physician refs are impossible)

Design Decisions:
    - Counting and locking happen in services/guard_invariants.py inside the same
      transaction as the delete; this module only renders the verdict
"""

from pharmadb.core.domain_types import DoctorId, PatientId
from pharmadb.core.errors import InvariantViolationError

DOCTOR_RETAINS_PATIENT = "doctor_retains_patient"
DOCTOR_HAS_PATIENTS = "doctor_has_patients"


def check_doctor_retains_patient(
    doctor_id: DoctorId, patient_id: PatientId, remaining_patients: int,
) -> InvariantViolationError | None:
    """Rule: deleting patient_id must leave doctor_id with >= 1 other patient."""
    if remaining_patients > 0:
        return None
    return InvariantViolationError(
        DOCTOR_RETAINS_PATIENT,
        f"Doctor '{doctor_id}' must retain at least one patient; "
        f"patient '{patient_id}' is the last one",
    )


def check_doctor_unreferenced(
    doctor_id: DoctorId, patient_count: int,
) -> InvariantViolationError | None:
    """Rule: a doctor can only be deleted once no patient names them as physician."""
    if patient_count == 0:
        return None
    return InvariantViolationError(
        DOCTOR_HAS_PATIENTS,
        f"Doctor '{doctor_id}' is the physician of {patient_count} patient(s)",
    )
