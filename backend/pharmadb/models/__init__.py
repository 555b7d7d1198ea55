"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column-level constraints (NOT NULL, CHECK, PK/UNIQUE, FK) live here and nowhere else

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from pharmadb.models.doctor import Doctor  # noqa: F401
from pharmadb.models.patient import Patient  # noqa: F401
from pharmadb.models.pharmaceutical_company import PharmaceuticalCompany  # noqa: F401
from pharmadb.models.pharmacy import Pharmacy  # noqa: F401
from pharmadb.models.drug import Drug  # noqa: F401
from pharmadb.models.contract import Contract  # noqa: F401
from pharmadb.models.pharmacy_drug import PharmacyDrug  # noqa: F401
from pharmadb.models.prescription import Prescription  # noqa: F401
from pharmadb.models.prescription_detail import PrescriptionDetail  # noqa: F401
