"""Report Routes — read-only projections (no invariants, no locks)."""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pharmadb.api.deps import get_report_service
from pharmadb.services.reports import ReportService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/patients/{patient_id}/prescriptions")
async def patient_prescriptions(
    patient_id: str,
    start: dt.date = Query(...),
    end: dt.date = Query(...),
    reports: ReportService = Depends(get_report_service),
):
    if end < start:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, detail="end must not precede start",
        )
    return {"prescriptions": await reports.patient_prescriptions(patient_id, start, end)}


@router.get("/patients/{patient_id}/prescriptions/{date}")
async def prescription_details(
    patient_id: str, date: dt.date,
    reports: ReportService = Depends(get_report_service),
):
    return {"details": await reports.prescription_details(patient_id, date)}


@router.get("/companies/{company_name}/drugs")
async def company_catalog(
    company_name: str, reports: ReportService = Depends(get_report_service),
):
    return {"drugs": await reports.company_catalog(company_name)}


@router.get("/pharmacies/{pharmacy_id}/stock")
async def pharmacy_stock(
    pharmacy_id: int, reports: ReportService = Depends(get_report_service),
):
    return {"stock": await reports.pharmacy_stock(pharmacy_id)}


@router.get("/pharmacies/{pharmacy_id}/contracts/{company_name}")
async def contracts_between(
    pharmacy_id: int, company_name: str,
    reports: ReportService = Depends(get_report_service),
):
    return {"contracts": await reports.contracts_between(pharmacy_id, company_name)}


@router.get("/doctors/{doctor_id}/patients")
async def doctor_patients(
    doctor_id: str, reports: ReportService = Depends(get_report_service),
):
    return {"patients": await reports.doctor_patients(doctor_id)}
