"""Catalog Routes — drugs and pharmacy inventory.

Invariants:
    - PUT /pharmacies/{id}/drugs/{drug_id} is the idempotent stock upsert:
      201 when the row was inserted, 200 when it was overwritten
    - PATCH on the same path only updates an existing inventory row (404 otherwise)
"""

from fastapi import APIRouter, Depends, Response, status

from pharmadb.api.deps import get_mutation_api
from pharmadb.api.responses import upsert_response
from pharmadb.schemas.entities import DrugBody, StockEntry
from pharmadb.services.mutation_api import MutationAPI

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.post("/drugs", status_code=status.HTTP_201_CREATED)
async def add_drug(body: DrugBody, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("add_drug", **body.model_dump())
    return result.to_dict()


@router.put("/drugs/{drug_id}")
async def update_drug(
    drug_id: int, body: DrugBody, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute("update_drug", drug_id=drug_id, **body.model_dump())
    return result.to_dict()


@router.delete("/drugs/{drug_id}")
async def delete_drug(drug_id: int, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_drug", drug_id=drug_id)
    return result.to_dict()


@router.put("/pharmacies/{pharmacy_id}/drugs/{drug_id}")
async def add_drug_to_pharmacy(
    pharmacy_id: int, drug_id: int, body: StockEntry, response: Response,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "add_drug_to_pharmacy", pharmacy_id=pharmacy_id, drug_id=drug_id,
        price=body.price, stock=body.stock,
    )
    return upsert_response(result, response)


@router.patch("/pharmacies/{pharmacy_id}/drugs/{drug_id}")
async def update_pharmacy_drug(
    pharmacy_id: int, drug_id: int, body: StockEntry,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_pharmacy_drug", pharmacy_id=pharmacy_id, drug_id=drug_id,
        price=body.price, stock=body.stock,
    )
    return result.to_dict()


@router.delete("/pharmacies/{pharmacy_id}/drugs/{drug_id}")
async def delete_pharmacy_drug(
    pharmacy_id: int, drug_id: int, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "delete_pharmacy_drug", pharmacy_id=pharmacy_id, drug_id=drug_id,
    )
    return result.to_dict()
