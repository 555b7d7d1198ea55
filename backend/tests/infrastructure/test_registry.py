"""Entity Registry — every kind maps to a model and key columns.

Tests cover:
    - MODELS and KEY_COLUMNS cover every EntityKind
    - key_filter accepts scalar and composite keys
    - Wrong composite arity raises ValueError
"""

import pytest

from pharmadb.core.domain_types import EntityKind
from pharmadb.models.registry import KEY_COLUMNS, MODELS, key_filter


def test_registry_covers_every_kind():
    assert set(MODELS) == set(EntityKind)
    assert set(KEY_COLUMNS) == set(EntityKind)


def test_key_filter_scalar_key():
    assert len(key_filter(EntityKind.DOCTOR, "D1")) == 1


def test_key_filter_composite_key():
    assert len(key_filter(EntityKind.PHARMACY_DRUG, (1, 2))) == 2


def test_key_filter_wrong_arity():
    with pytest.raises(ValueError):
        key_filter(EntityKind.PRESCRIPTION_DETAIL, 7)
