"""PharmacyDrug ORM — inventory row: one drug stocked by one pharmacy.

Invariants:
    - Composite primary key (pharmacy_id, drug_id): one row per pair
    - price > 0, stock >= 0 (CHECK)
    - No independent lifecycle: removed with its pharmacy (orchestrated) or drug (declarative)
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class PharmacyDrug(Base):
    """Inventory association between Pharmacy and Drug."""
    __tablename__ = "pharmacy_drugs"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_pharmacy_drugs_price_positive"),
        CheckConstraint("stock >= 0", name="ck_pharmacy_drugs_stock_non_negative"),
    )

    pharmacy_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("pharmacies.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    drug_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("drugs.id", ondelete="CASCADE"),
        primary_key=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
