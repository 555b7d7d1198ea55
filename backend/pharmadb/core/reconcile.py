"""Upsert Reconciliation — merge policies for insert-or-merge writes.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Inventory and line-item upserts are full overwrites (idempotent, never accumulate)
    - A prescription is re-dated only by a strictly later date
    - Detail rows are cleared if and only if the date actually changed

Design Decisions:
    - Merge plan as a frozen dataclass: the shell executes exactly what the plan says,
      so the "re-date clears line items" rule is testable in isolation
"""

from dataclasses import dataclass
from datetime import date

from pharmadb.core.domain_types import UpsertOutcome


@dataclass(frozen=True)
class PrescriptionMergePlan:
    """What add_prescription must do with the live prescription of a pair."""
    outcome: UpsertOutcome
    store_date: date | None
    clear_details: bool


def upsert_outcome(existed: bool) -> UpsertOutcome:
    """Tag an overwrite-style upsert by whether the keyed row was already there."""
    return UpsertOutcome.UPDATED if existed else UpsertOutcome.INSERTED


def plan_prescription_merge(
    stored_date: date | None, requested_date: date,
) -> PrescriptionMergePlan:
    """Decide find-or-create behaviour for a (patient, doctor) prescription.

    stored_date is None when the pair has no prescription yet.
    """
    if stored_date is None:
        return PrescriptionMergePlan(
            UpsertOutcome.INSERTED, requested_date, clear_details=False,
        )
    if requested_date > stored_date:
        return PrescriptionMergePlan(
            UpsertOutcome.UPDATED, requested_date, clear_details=True,
        )
    return PrescriptionMergePlan(
        UpsertOutcome.UNCHANGED, None, clear_details=False,
    )
