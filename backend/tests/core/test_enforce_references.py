"""Reference Enforcement — tests for the pure reference verdict.

Tests cover:
    - check_references returns None when every lookup succeeded
    - The first missing reference (declaration order) is the one reported
    - The error names entity, key and field
    - Mismatched check/lookup lengths are a programming error
"""

import pytest

from pharmadb.core.domain_types import EntityKind
from pharmadb.core.enforce_references import (
    ReferenceCheck, check_references, find_missing_reference,
)
from pharmadb.core.errors import ReferenceNotFoundError

_PHARMACY = ReferenceCheck(EntityKind.PHARMACY, 1, "pharmacy_id")
_DRUG = ReferenceCheck(EntityKind.DRUG, 9, "drug_id")


def test_check_references_returns_none_when_all_found():
    assert check_references([_PHARMACY, _DRUG], [True, True]) is None


def test_check_references_returns_none_for_no_checks():
    assert check_references([], []) is None


def test_first_missing_reference_wins():
    assert find_missing_reference([_PHARMACY, _DRUG], [False, False]) is _PHARMACY


def test_later_missing_reference_reported_when_earlier_found():
    error = check_references([_PHARMACY, _DRUG], [True, False])
    assert isinstance(error, ReferenceNotFoundError)
    assert error.entity == "drug"
    assert error.key == 9
    assert error.field == "drug_id"


def test_error_carries_http_422_and_context():
    error = check_references([_PHARMACY], [False])
    assert error.http_status == 422
    assert error.code == "REFERENCE_NOT_FOUND"
    assert error.context.entity == "pharmacy"
    assert error.context.key == "1"


def test_length_mismatch_raises_value_error():
    with pytest.raises(ValueError):
        find_missing_reference([_PHARMACY, _DRUG], [True])
