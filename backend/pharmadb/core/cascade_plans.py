"""Cascade Plans — which child rows the application removes before a parent, and in what order.

Invariants:
    - Children are always removed before parents
    - ORCHESTRATED plans list only cascades the schema does NOT perform itself
    - DECLARATIVE_CASCADES documents the FK ON DELETE CASCADE rules of the store;
      the two maps never name the same parent/child pair

Design Decisions:
    - Plans as data over per-entity delete functions: one executor
      (services/orchestrate_cascades.py) runs them all inside one transaction
    - Column names as strings: core stays free of ORM imports
"""

from dataclasses import dataclass

from pharmadb.core.domain_types import EntityKind


@dataclass(frozen=True)
class CascadeStep:
    """Delete every `child` row whose `parent_column` equals the parent key."""
    child: EntityKind
    parent_column: str


ORCHESTRATED_CASCADES: dict[EntityKind, tuple[CascadeStep, ...]] = {
    EntityKind.PHARMACY: (
        CascadeStep(EntityKind.PHARMACY_DRUG, "pharmacy_id"),
        CascadeStep(EntityKind.CONTRACT, "pharmacy_id"),
    ),
    EntityKind.COMPANY: (
        CascadeStep(EntityKind.CONTRACT, "company_name"),
    ),
    EntityKind.PRESCRIPTION: (
        CascadeStep(EntityKind.PRESCRIPTION_DETAIL, "prescription_id"),
    ),
}

# Performed by the store (FK ON DELETE CASCADE), listed for reference only
DECLARATIVE_CASCADES: dict[EntityKind, tuple[EntityKind, ...]] = {
    EntityKind.COMPANY: (EntityKind.DRUG,),
    EntityKind.DRUG: (EntityKind.PHARMACY_DRUG, EntityKind.PRESCRIPTION_DETAIL),
}


def cascade_plan(kind: EntityKind) -> tuple[CascadeStep, ...]:
    """Ordered child-removal steps for deleting one `kind` row (empty for leaf deletes)."""
    return ORCHESTRATED_CASCADES.get(kind, ())
