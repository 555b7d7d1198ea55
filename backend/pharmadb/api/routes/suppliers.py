"""Supplier Routes — pharmaceutical companies, pharmacies, contracts."""

from fastapi import APIRouter, Depends, status

from pharmadb.api.deps import get_mutation_api
from pharmadb.schemas.entities import (
    CompanyCreate, CompanyUpdate, ContractBody, PharmacyBody, SupervisorUpdate,
)
from pharmadb.services.mutation_api import MutationAPI

router = APIRouter(prefix="/api/v1", tags=["suppliers"])


@router.post("/companies", status_code=status.HTTP_201_CREATED)
async def add_company(body: CompanyCreate, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute(
        "add_pharmaceutical_company", name=body.name, phone=body.phone,
    )
    return result.to_dict()


@router.put("/companies/{name}")
async def update_company(
    name: str, body: CompanyUpdate, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_pharmaceutical_company", name=name, phone=body.phone,
    )
    return result.to_dict()


@router.delete("/companies/{name}")
async def delete_company(name: str, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_pharmaceutical_company", name=name)
    return result.to_dict()


@router.post("/pharmacies", status_code=status.HTTP_201_CREATED)
async def add_pharmacy(body: PharmacyBody, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("add_pharmacy", **body.model_dump())
    return result.to_dict()


@router.put("/pharmacies/{pharmacy_id}")
async def update_pharmacy(
    pharmacy_id: int, body: PharmacyBody, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_pharmacy", pharmacy_id=pharmacy_id, **body.model_dump(),
    )
    return result.to_dict()


@router.delete("/pharmacies/{pharmacy_id}")
async def delete_pharmacy(pharmacy_id: int, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_pharmacy", pharmacy_id=pharmacy_id)
    return result.to_dict()


@router.post("/contracts", status_code=status.HTTP_201_CREATED)
async def add_contract(body: ContractBody, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("add_contract", **body.model_dump())
    return result.to_dict()


@router.put("/contracts/{contract_id}")
async def update_contract(
    contract_id: int, body: ContractBody, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_contract", contract_id=contract_id, **body.model_dump(),
    )
    return result.to_dict()


@router.put("/contracts/{contract_id}/supervisor")
async def update_contract_supervisor(
    contract_id: int, body: SupervisorUpdate,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_contract_supervisor", contract_id=contract_id,
        supervisor=body.supervisor,
    )
    return result.to_dict()


@router.delete("/contracts/{contract_id}")
async def delete_contract(contract_id: int, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_contract", contract_id=contract_id)
    return result.to_dict()
