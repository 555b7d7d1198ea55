"""People Routes — doctors and patients.

Invariants:
    - DELETE /patients/{id} answers 409 when the patient is their doctor's last one
    - DELETE /doctors/{id} answers 409 while the doctor still has patients
"""

from fastapi import APIRouter, Depends, status

from pharmadb.api.deps import get_mutation_api
from pharmadb.schemas.entities import (
    DoctorCreate, DoctorUpdate, PatientCreate, PatientUpdate,
)
from pharmadb.services.mutation_api import MutationAPI

router = APIRouter(prefix="/api/v1", tags=["people"])


@router.post("/doctors", status_code=status.HTTP_201_CREATED)
async def add_doctor(body: DoctorCreate, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute(
        "add_doctor", doctor_id=body.id, name=body.name,
        specialty=body.specialty, years_of_experience=body.years_of_experience,
    )
    return result.to_dict()


@router.put("/doctors/{doctor_id}")
async def update_doctor(
    doctor_id: str, body: DoctorUpdate, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute("update_doctor", doctor_id=doctor_id, **body.model_dump())
    return result.to_dict()


@router.delete("/doctors/{doctor_id}")
async def delete_doctor(doctor_id: str, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_doctor", doctor_id=doctor_id)
    return result.to_dict()


@router.post("/patients", status_code=status.HTTP_201_CREATED)
async def add_patient(body: PatientCreate, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute(
        "add_patient", patient_id=body.id, name=body.name,
        address=body.address, age=body.age, doctor_id=body.doctor_id,
    )
    return result.to_dict()


@router.put("/patients/{patient_id}")
async def update_patient(
    patient_id: str, body: PatientUpdate, api: MutationAPI = Depends(get_mutation_api),
):
    result = await api.execute("update_patient", patient_id=patient_id, **body.model_dump())
    return result.to_dict()


@router.delete("/patients/{patient_id}")
async def delete_patient(patient_id: str, api: MutationAPI = Depends(get_mutation_api)):
    result = await api.execute("delete_patient", patient_id=patient_id)
    return result.to_dict()
