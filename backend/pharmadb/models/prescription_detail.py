"""PrescriptionDetail ORM — line item: quantity of one drug on one prescription.

Invariants:
    - Composite primary key (prescription_id, drug_id): one row per pair
    - quantity > 0 (CHECK)
    - No independent lifecycle: removed with its prescription (orchestrated) or drug (declarative)
"""

from sqlalchemy import Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class PrescriptionDetail(Base):
    """Line item association between Prescription and Drug."""
    __tablename__ = "prescription_details"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_prescription_details_quantity_positive"),
    )

    prescription_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("prescriptions.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    drug_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("drugs.id", ondelete="CASCADE"),
        primary_key=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
