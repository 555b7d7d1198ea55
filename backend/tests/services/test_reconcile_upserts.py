"""Upsert Reconciler — overwrite upserts and prescription find-or-create.

Tests cover:
    - add_drug_to_pharmacy inserts, then overwrites price and stock (no accumulation)
    - Repeating the same upsert leaves the same state
    - add_drug_to_prescription overwrites the quantity
    - add_prescription: first call inserts, a later date re-dates and clears line items,
      an equal or earlier date changes nothing
    - Scalar violations surface as ConstraintViolation with no partial write
"""

import datetime as dt
from decimal import Decimal

import pytest

from pharmadb.core.domain_types import MutationOutcome, UpsertOutcome
from pharmadb.core.errors import ConstraintViolationError
from pharmadb.models.pharmacy_drug import PharmacyDrug
from pharmadb.models.prescription import Prescription
from pharmadb.models.prescription_detail import PrescriptionDetail


# ─── Inventory ───────────────────────────────────────────────────

async def test_stocking_new_drug_is_inserted(api, store, world):
    result = await api.execute(
        "add_drug_to_pharmacy", pharmacy_id=world["pharmacy"],
        drug_id=world["drug_c"], price=Decimal("12.50"), stock=4,
    )
    assert result.outcome is MutationOutcome.UPSERTED
    assert result.upsert is UpsertOutcome.INSERTED
    assert result.key == (world["pharmacy"], world["drug_c"])
    row = await store.get(PharmacyDrug, (world["pharmacy"], world["drug_c"]))
    assert row.stock == 4


async def test_restocking_overwrites_price_and_stock(api, store, world):
    key = (world["pharmacy"], world["drug_a"])
    result = await api.execute(
        "add_drug_to_pharmacy", pharmacy_id=key[0], drug_id=key[1],
        price=Decimal("7.25"), stock=3,
    )
    assert result.upsert is UpsertOutcome.UPDATED
    row = await store.get(PharmacyDrug, key)
    assert row.price == Decimal("7.25")
    assert row.stock == 3
    assert await store.count(PharmacyDrug) == 2


async def test_repeated_upsert_is_idempotent(api, store, world):
    params = dict(
        pharmacy_id=world["pharmacy"], drug_id=world["drug_b"],
        price=Decimal("5.00"), stock=8,
    )
    await api.execute("add_drug_to_pharmacy", **params)
    await api.execute("add_drug_to_pharmacy", **params)
    row = await store.get(PharmacyDrug, (world["pharmacy"], world["drug_b"]))
    assert row.stock == 8
    assert await store.count(PharmacyDrug) == 2


async def test_negative_stock_rejected_without_write(api, store, world):
    key = (world["pharmacy"], world["drug_a"])
    with pytest.raises(ConstraintViolationError):
        await api.execute(
            "add_drug_to_pharmacy", pharmacy_id=key[0], drug_id=key[1],
            price=Decimal("1.00"), stock=-1,
        )
    assert (await store.get(PharmacyDrug, key)).stock == 10


async def test_zero_price_rejected(api, world):
    with pytest.raises(ConstraintViolationError):
        await api.execute(
            "add_drug_to_pharmacy", pharmacy_id=world["pharmacy"],
            drug_id=world["drug_c"], price=Decimal("0"), stock=1,
        )


# ─── Prescriptions ───────────────────────────────────────────────

async def _prescribe(api, date, patient_id="P1", doctor_id="D1"):
    return await api.execute(
        "add_prescription", patient_id=patient_id, doctor_id=doctor_id, date=date,
    )


async def test_first_prescription_inserted(api, store, world):
    result = await _prescribe(api, dt.date(2024, 3, 1))
    assert result.upsert is UpsertOutcome.INSERTED
    row = await store.get(Prescription, result.key)
    assert row.date == dt.date(2024, 3, 1)


async def test_later_date_redates_and_clears_line_items(api, store, world):
    first = await _prescribe(api, dt.date(2024, 3, 1))
    for drug in ("drug_a", "drug_b"):
        await api.execute(
            "add_drug_to_prescription", prescription_id=first.key,
            drug_id=world[drug], quantity=2,
        )

    again = await _prescribe(api, dt.date(2024, 5, 1))
    assert again.upsert is UpsertOutcome.UPDATED
    assert again.key == first.key
    assert again.affected_rows == 3
    assert (await store.get(Prescription, first.key)).date == dt.date(2024, 5, 1)
    assert await store.count(
        PrescriptionDetail, PrescriptionDetail.prescription_id == first.key,
    ) == 0
    assert await store.count(Prescription) == 1


@pytest.mark.parametrize("date", [dt.date(2024, 3, 1), dt.date(2024, 1, 15)])
async def test_same_or_earlier_date_unchanged(api, store, world, date):
    first = await _prescribe(api, dt.date(2024, 3, 1))
    await api.execute(
        "add_drug_to_prescription", prescription_id=first.key,
        drug_id=world["drug_a"], quantity=2,
    )

    again = await _prescribe(api, date)
    assert again.upsert is UpsertOutcome.UNCHANGED
    assert again.affected_rows == 0
    assert (await store.get(Prescription, first.key)).date == dt.date(2024, 3, 1)
    assert await store.count(PrescriptionDetail) == 1


async def test_pairs_are_independent(api, store, world):
    await _prescribe(api, dt.date(2024, 3, 1), patient_id="P1")
    await _prescribe(api, dt.date(2024, 3, 1), patient_id="P2")
    assert await store.count(Prescription) == 2


async def test_line_item_quantity_overwritten(api, store, world):
    prescription = (await _prescribe(api, dt.date(2024, 3, 1))).key
    key = (prescription, world["drug_a"])
    await api.execute(
        "add_drug_to_prescription", prescription_id=key[0], drug_id=key[1], quantity=2,
    )
    result = await api.execute(
        "add_drug_to_prescription", prescription_id=key[0], drug_id=key[1], quantity=5,
    )
    assert result.upsert is UpsertOutcome.UPDATED
    assert (await store.get(PrescriptionDetail, key)).quantity == 5


async def test_zero_quantity_rejected(api, store, world):
    prescription = (await _prescribe(api, dt.date(2024, 3, 1))).key
    with pytest.raises(ConstraintViolationError):
        await api.execute(
            "add_drug_to_prescription", prescription_id=prescription,
            drug_id=world["drug_a"], quantity=0,
        )
    assert await store.count(PrescriptionDetail) == 0
