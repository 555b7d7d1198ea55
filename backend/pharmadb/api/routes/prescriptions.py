"""Prescription Routes — prescription headers and line items.

Invariants:
    - POST /prescriptions is find-or-create per (patient, doctor); the body's
      "upsert" field tells whether it inserted, re-dated or left the prescription as is;
      201 only when a prescription was inserted, 200 otherwise
    - PUT /prescriptions/{id}/drugs/{drug_id} is the idempotent line-item upsert
"""

from fastapi import APIRouter, Depends, Response

from pharmadb.api.deps import get_mutation_api
from pharmadb.api.responses import upsert_response
from pharmadb.schemas.entities import LineItem, PrescriptionBody
from pharmadb.services.mutation_api import MutationAPI

router = APIRouter(prefix="/api/v1/prescriptions", tags=["prescriptions"])


@router.post("")
async def add_prescription(
    body: PrescriptionBody, response: Response,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute("add_prescription", **body.model_dump())
    return upsert_response(result, response)


@router.put("/{prescription_id}")
async def update_prescription(
    prescription_id: int, body: PrescriptionBody,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_prescription", prescription_id=prescription_id, **body.model_dump(),
    )
    return result.to_dict()


@router.delete("/{prescription_id}")
async def delete_prescription(
    prescription_id: int, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute("delete_prescription", prescription_id=prescription_id)
    return result.to_dict()


@router.put("/{prescription_id}/drugs/{drug_id}")
async def add_drug_to_prescription(
    prescription_id: int, drug_id: int, body: LineItem, response: Response,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "add_drug_to_prescription", prescription_id=prescription_id,
        drug_id=drug_id, quantity=body.quantity,
    )
    return upsert_response(result, response)


@router.patch("/{prescription_id}/drugs/{drug_id}")
async def update_prescription_detail(
    prescription_id: int, drug_id: int, body: LineItem,
    api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "update_prescription_detail", prescription_id=prescription_id,
        drug_id=drug_id, quantity=body.quantity,
    )
    return result.to_dict()


@router.delete("/{prescription_id}/drugs/{drug_id}")
async def delete_prescription_detail(
    prescription_id: int, drug_id: int, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute(
        "delete_prescription_detail", prescription_id=prescription_id, drug_id=drug_id,
    )
    return result.to_dict()
