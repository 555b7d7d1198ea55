"""Initial schema — people, suppliers, catalog, inventory, prescriptions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Foreign keys split into two groups:
    - ON DELETE CASCADE (store-side): drugs -> company, inventory/details -> drug
    - RESTRICT (application-orchestrated): inventory -> pharmacy, contracts -> pharmacy/company,
      details -> prescription, patients/prescriptions -> doctor, prescriptions -> patient
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "doctors",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("specialty", sa.String(100), nullable=False),
        sa.Column("years_of_experience", sa.Integer, nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "years_of_experience >= 0", name="ck_doctors_experience_non_negative",
        ),
    )

    op.create_table(
        "patients",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(200), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column(
            "doctor_id", sa.String(20),
            sa.ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False,
        ),
        _created_at(),
        sa.CheckConstraint("age > 0", name="ck_patients_age_positive"),
    )
    op.create_index("ix_patients_doctor_id", "patients", ["doctor_id"])

    op.create_table(
        "pharmaceutical_companies",
        sa.Column("name", sa.String(100), primary_key=True),
        sa.Column("phone", sa.String(30), nullable=False),
        _created_at(),
    )

    op.create_table(
        "pharmacies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(30), nullable=False),
        _created_at(),
    )

    op.create_table(
        "drugs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("trade_name", sa.String(100), nullable=False),
        sa.Column("formula", sa.String(200), nullable=False),
        sa.Column(
            "company_name", sa.String(100),
            sa.ForeignKey("pharmaceutical_companies.name", ondelete="CASCADE"),
            nullable=False,
        ),
        _created_at(),
        sa.UniqueConstraint(
            "trade_name", "company_name", name="uq_drugs_trade_name_company",
        ),
    )
    op.create_index("ix_drugs_company_name", "drugs", ["company_name"])

    op.create_table(
        "contracts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "pharmacy_id", sa.Integer,
            sa.ForeignKey("pharmacies.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column(
            "company_name", sa.String(100),
            sa.ForeignKey("pharmaceutical_companies.name", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("supervisor", sa.String(100), nullable=False),
        _created_at(),
        sa.CheckConstraint("end_date > start_date", name="ck_contracts_dates_ordered"),
    )
    op.create_index("ix_contracts_pharmacy_id", "contracts", ["pharmacy_id"])
    op.create_index("ix_contracts_company_name", "contracts", ["company_name"])

    op.create_table(
        "pharmacy_drugs",
        sa.Column(
            "pharmacy_id", sa.Integer,
            sa.ForeignKey("pharmacies.id", ondelete="RESTRICT"), primary_key=True,
        ),
        sa.Column(
            "drug_id", sa.Integer,
            sa.ForeignKey("drugs.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock", sa.Integer, nullable=False),
        sa.CheckConstraint("price > 0", name="ck_pharmacy_drugs_price_positive"),
        sa.CheckConstraint("stock >= 0", name="ck_pharmacy_drugs_stock_non_negative"),
    )

    op.create_table(
        "prescriptions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "patient_id", sa.String(20),
            sa.ForeignKey("patients.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column(
            "doctor_id", sa.String(20),
            sa.ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("date", sa.Date, nullable=False),
        _created_at(),
        sa.UniqueConstraint(
            "patient_id", "doctor_id", "date",
            name="uq_prescriptions_patient_doctor_date",
        ),
    )
    op.create_index("ix_prescriptions_patient_id", "prescriptions", ["patient_id"])
    op.create_index("ix_prescriptions_doctor_id", "prescriptions", ["doctor_id"])

    op.create_table(
        "prescription_details",
        sa.Column(
            "prescription_id", sa.Integer,
            sa.ForeignKey("prescriptions.id", ondelete="RESTRICT"), primary_key=True,
        ),
        sa.Column(
            "drug_id", sa.Integer,
            sa.ForeignKey("drugs.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.CheckConstraint(
            "quantity > 0", name="ck_prescription_details_quantity_positive",
        ),
    )


def downgrade() -> None:
    op.drop_table("prescription_details")
    op.drop_table("prescriptions")
    op.drop_table("pharmacy_drugs")
    op.drop_table("contracts")
    op.drop_table("drugs")
    op.drop_table("pharmacies")
    op.drop_table("pharmaceutical_companies")
    op.drop_table("patients")
    op.drop_table("doctors")
