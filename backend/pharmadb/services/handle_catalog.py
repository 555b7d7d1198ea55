"""Catalog Handlers — drugs and pharmacy inventory rows.

Invariants:
    - add/update_drug validate the owning company first
    - add_drug_to_pharmacy is an overwrite upsert (see services/reconcile_upserts.py)
    - update_pharmacy_drug only touches an existing inventory row (NotFoundError otherwise)
"""

from decimal import Decimal

from pharmadb.core.domain_types import (
    CompanyName, DrugId, EntityKind, MutationOutcome, PharmacyId,
)
from pharmadb.core.enforce_references import ReferenceCheck
from pharmadb.core.mutation_result import MutationResult
from pharmadb.models.drug import Drug
from pharmadb.services.mutation_context import MutationContext
from pharmadb.services.write_rows import insert_row, update_row


class CatalogHandlers:
    """Drug and inventory mutations."""

    def __init__(self, ctx: MutationContext):
        self.ctx = ctx

    async def add_drug(
        self, trade_name: str, formula: str, company_name: CompanyName,
    ) -> MutationResult:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.COMPANY, company_name, "company_name"),
        )
        drug = await insert_row(self.ctx.db, Drug(
            trade_name=trade_name, formula=formula, company_name=company_name,
        ))
        return MutationResult(MutationOutcome.CREATED, drug.id)

    async def update_drug(
        self, drug_id: DrugId, trade_name: str, formula: str, company_name: CompanyName,
    ) -> MutationResult:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.COMPANY, company_name, "company_name"),
        )
        return await update_row(self.ctx.db, EntityKind.DRUG, drug_id, {
            "trade_name": trade_name, "formula": formula,
            "company_name": company_name,
        })

    async def delete_drug(self, drug_id: DrugId) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(EntityKind.DRUG, drug_id)
        return MutationResult(MutationOutcome.DELETED, drug_id, removed)

    async def add_drug_to_pharmacy(
        self, pharmacy_id: PharmacyId, drug_id: DrugId, price: Decimal, stock: int,
    ) -> MutationResult:
        return await self.ctx.reconciler.add_drug_to_pharmacy(
            pharmacy_id, drug_id, price, stock,
        )

    async def update_pharmacy_drug(
        self, pharmacy_id: PharmacyId, drug_id: DrugId, price: Decimal, stock: int,
    ) -> MutationResult:
        return await update_row(
            self.ctx.db, EntityKind.PHARMACY_DRUG, (pharmacy_id, drug_id),
            {"price": price, "stock": stock},
        )

    async def delete_pharmacy_drug(
        self, pharmacy_id: PharmacyId, drug_id: DrugId,
    ) -> MutationResult:
        key = (pharmacy_id, drug_id)
        removed = await self.ctx.orchestrator.delete(EntityKind.PHARMACY_DRUG, key)
        return MutationResult(MutationOutcome.DELETED, key, removed)
