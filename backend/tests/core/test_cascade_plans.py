"""Cascade Plans — tests for the ordered child-removal plans.

Tests cover:
    - Pharmacy deletion removes inventory before contracts
    - Company and prescription plans name their children
    - Leaf entities have empty plans
    - Orchestrated and declarative cascades never overlap
"""

from pharmadb.core.cascade_plans import (
    DECLARATIVE_CASCADES, ORCHESTRATED_CASCADES, CascadeStep, cascade_plan,
)
from pharmadb.core.domain_types import EntityKind


def test_pharmacy_plan_removes_inventory_then_contracts():
    assert cascade_plan(EntityKind.PHARMACY) == (
        CascadeStep(EntityKind.PHARMACY_DRUG, "pharmacy_id"),
        CascadeStep(EntityKind.CONTRACT, "pharmacy_id"),
    )


def test_company_plan_removes_contracts():
    assert [s.child for s in cascade_plan(EntityKind.COMPANY)] == [EntityKind.CONTRACT]


def test_prescription_plan_removes_details():
    steps = cascade_plan(EntityKind.PRESCRIPTION)
    assert steps == (CascadeStep(EntityKind.PRESCRIPTION_DETAIL, "prescription_id"),)


def test_leaf_entities_have_empty_plans():
    for kind in (EntityKind.CONTRACT, EntityKind.PHARMACY_DRUG, EntityKind.PATIENT):
        assert cascade_plan(kind) == ()


def test_orchestrated_and_declarative_never_overlap():
    orchestrated = {
        (parent, step.child)
        for parent, steps in ORCHESTRATED_CASCADES.items() for step in steps
    }
    declarative = {
        (parent, child)
        for parent, children in DECLARATIVE_CASCADES.items() for child in children
    }
    assert orchestrated.isdisjoint(declarative)
