"""Supplier Handlers — pharmaceutical companies, pharmacies and the contracts between them.

Invariants:
    - Contracts validate both parties before any write
    - Company deletion removes its contracts first (its drugs go via the store's FK cascade)
    - Pharmacy deletion removes inventory rows, then contracts, then the pharmacy
    - Contract deletion is unconditional
"""

import datetime as dt

from pharmadb.core.domain_types import (
    CompanyName, ContractId, EntityKind, MutationOutcome, PharmacyId,
)
from pharmadb.core.enforce_references import ReferenceCheck
from pharmadb.core.mutation_result import MutationResult
from pharmadb.models.contract import Contract
from pharmadb.models.pharmaceutical_company import PharmaceuticalCompany
from pharmadb.models.pharmacy import Pharmacy
from pharmadb.services.mutation_context import MutationContext
from pharmadb.services.write_rows import insert_row, update_row


class SupplierHandlers:
    """Company, pharmacy and contract mutations."""

    def __init__(self, ctx: MutationContext):
        self.ctx = ctx

    # ─── Pharmaceutical companies ───────────────────────────────

    async def add_pharmaceutical_company(
        self, name: CompanyName, phone: str,
    ) -> MutationResult:
        await insert_row(self.ctx.db, PharmaceuticalCompany(name=name, phone=phone))
        return MutationResult(MutationOutcome.CREATED, name)

    async def update_pharmaceutical_company(
        self, name: CompanyName, phone: str,
    ) -> MutationResult:
        return await update_row(
            self.ctx.db, EntityKind.COMPANY, name, {"phone": phone},
        )

    async def delete_pharmaceutical_company(self, name: CompanyName) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(EntityKind.COMPANY, name)
        return MutationResult(MutationOutcome.DELETED, name, removed)

    # ─── Pharmacies ─────────────────────────────────────────────

    async def add_pharmacy(self, name: str, address: str, phone: str) -> MutationResult:
        pharmacy = await insert_row(
            self.ctx.db, Pharmacy(name=name, address=address, phone=phone),
        )
        return MutationResult(MutationOutcome.CREATED, pharmacy.id)

    async def update_pharmacy(
        self, pharmacy_id: PharmacyId, name: str, address: str, phone: str,
    ) -> MutationResult:
        return await update_row(self.ctx.db, EntityKind.PHARMACY, pharmacy_id, {
            "name": name, "address": address, "phone": phone,
        })

    async def delete_pharmacy(self, pharmacy_id: PharmacyId) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(EntityKind.PHARMACY, pharmacy_id)
        return MutationResult(MutationOutcome.DELETED, pharmacy_id, removed)

    # ─── Contracts ──────────────────────────────────────────────

    async def _require_parties(
        self, pharmacy_id: PharmacyId, company_name: CompanyName,
    ) -> None:
        await self.ctx.validator.require(
            ReferenceCheck(EntityKind.PHARMACY, pharmacy_id, "pharmacy_id"),
            ReferenceCheck(EntityKind.COMPANY, company_name, "company_name"),
        )

    async def add_contract(
        self, pharmacy_id: PharmacyId, company_name: CompanyName, start_date: dt.date,
        end_date: dt.date, content: str, supervisor: str,
    ) -> MutationResult:
        await self._require_parties(pharmacy_id, company_name)
        contract = await insert_row(self.ctx.db, Contract(
            pharmacy_id=pharmacy_id, company_name=company_name,
            start_date=start_date, end_date=end_date,
            content=content, supervisor=supervisor,
        ))
        return MutationResult(MutationOutcome.CREATED, contract.id)

    async def update_contract(
        self, contract_id: ContractId, pharmacy_id: PharmacyId, company_name: CompanyName,
        start_date: dt.date, end_date: dt.date, content: str, supervisor: str,
    ) -> MutationResult:
        await self._require_parties(pharmacy_id, company_name)
        return await update_row(self.ctx.db, EntityKind.CONTRACT, contract_id, {
            "pharmacy_id": pharmacy_id, "company_name": company_name,
            "start_date": start_date, "end_date": end_date,
            "content": content, "supervisor": supervisor,
        })

    async def update_contract_supervisor(
        self, contract_id: ContractId, supervisor: str,
    ) -> MutationResult:
        return await update_row(
            self.ctx.db, EntityKind.CONTRACT, contract_id, {"supervisor": supervisor},
        )

    async def delete_contract(self, contract_id: ContractId) -> MutationResult:
        removed = await self.ctx.orchestrator.delete(EntityKind.CONTRACT, contract_id)
        return MutationResult(MutationOutcome.DELETED, contract_id, removed)
