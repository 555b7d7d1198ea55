"""Upsert Reconciliation — tests for the pure merge policies.

Tests cover:
    - upsert_outcome tags by prior existence
    - First prescription of a pair is inserted with the requested date
    - A strictly later date re-dates and clears line items
    - An equal or earlier date leaves the prescription unchanged
"""

from datetime import date

from pharmadb.core.domain_types import UpsertOutcome
from pharmadb.core.reconcile import plan_prescription_merge, upsert_outcome


def test_upsert_outcome_inserted_when_absent():
    assert upsert_outcome(existed=False) is UpsertOutcome.INSERTED


def test_upsert_outcome_updated_when_present():
    assert upsert_outcome(existed=True) is UpsertOutcome.UPDATED


def test_first_prescription_is_inserted():
    plan = plan_prescription_merge(None, date(2024, 3, 1))
    assert plan.outcome is UpsertOutcome.INSERTED
    assert plan.store_date == date(2024, 3, 1)
    assert plan.clear_details is False


def test_later_date_redates_and_clears_details():
    plan = plan_prescription_merge(date(2024, 3, 1), date(2024, 4, 1))
    assert plan.outcome is UpsertOutcome.UPDATED
    assert plan.store_date == date(2024, 4, 1)
    assert plan.clear_details is True


def test_same_date_is_unchanged():
    plan = plan_prescription_merge(date(2024, 3, 1), date(2024, 3, 1))
    assert plan.outcome is UpsertOutcome.UNCHANGED
    assert plan.store_date is None
    assert plan.clear_details is False


def test_earlier_date_is_unchanged():
    plan = plan_prescription_merge(date(2024, 3, 1), date(2023, 12, 31))
    assert plan.outcome is UpsertOutcome.UNCHANGED
