"""Entity Schemas — request bodies for every Mutation API operation exposed over HTTP.

Invariants:
    - Natural keys (national IDs, company names): 1-20 / 1-100 chars, stripped, non-empty
    - age > 0, years_of_experience >= 0, price > 0, stock >= 0, quantity > 0
    - Contract end_date strictly after start_date

Design Decisions:
    - Update bodies omit the key (it comes from the path): full replacement of non-key fields
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator


class _Stripped(BaseModel):
    """Strips every str field and rejects blank values."""

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("value cannot be empty or whitespace")
        return v


# ─── People ──────────────────────────────────────────────────────

class DoctorUpdate(_Stripped):
    name: str = Field(max_length=100)
    specialty: str = Field(max_length=100)
    years_of_experience: int = Field(ge=0)


class DoctorCreate(DoctorUpdate):
    id: str = Field(min_length=1, max_length=20)


class PatientUpdate(_Stripped):
    name: str = Field(max_length=100)
    address: str = Field(max_length=200)
    age: int = Field(gt=0)
    doctor_id: str = Field(min_length=1, max_length=20)


class PatientCreate(PatientUpdate):
    id: str = Field(min_length=1, max_length=20)


# ─── Suppliers ───────────────────────────────────────────────────

class CompanyUpdate(_Stripped):
    phone: str = Field(max_length=30)


class CompanyCreate(CompanyUpdate):
    name: str = Field(min_length=1, max_length=100)


class PharmacyBody(_Stripped):
    name: str = Field(max_length=100)
    address: str = Field(max_length=200)
    phone: str = Field(max_length=30)


class ContractBody(_Stripped):
    pharmacy_id: int
    company_name: str = Field(max_length=100)
    start_date: dt.date
    end_date: dt.date
    content: str = Field(max_length=10_000)
    supervisor: str = Field(max_length=100)

    @model_validator(mode="after")
    def validate_date_order(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class SupervisorUpdate(_Stripped):
    supervisor: str = Field(max_length=100)


# ─── Catalog ─────────────────────────────────────────────────────

class DrugBody(_Stripped):
    trade_name: str = Field(max_length=100)
    formula: str = Field(max_length=200)
    company_name: str = Field(max_length=100)


class StockEntry(BaseModel):
    """Inventory row values for (pharmacy, drug)."""
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(ge=0)


# ─── Prescriptions ───────────────────────────────────────────────

class PrescriptionBody(_Stripped):
    patient_id: str = Field(max_length=20)
    doctor_id: str = Field(max_length=20)
    date: dt.date


class LineItem(BaseModel):
    """Prescription detail values for (prescription, drug)."""
    quantity: int = Field(gt=0)
