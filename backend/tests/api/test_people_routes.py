"""People routes — status codes and error envelopes over HTTP.

Tests cover:
    - POST /doctors and /patients answer 201 with the mutation result
    - Unknown physician answers 422 REFERENCE_NOT_FOUND
    - Deleting a doctor's last patient answers 409 INVARIANT_VIOLATION
    - Missing rows answer 404; malformed bodies answer 400 CONSTRAINT_VIOLATION per field
"""

_DOCTOR = {"id": "D1", "name": "Dr. One", "specialty": "GP", "years_of_experience": 4}


async def _add_doctor_with_patients(client, *patient_ids):
    await client.post("/api/v1/doctors", json=_DOCTOR)
    for patient_id in patient_ids:
        await client.post("/api/v1/patients", json={
            "id": patient_id, "name": f"Patient {patient_id}",
            "address": "1 Main St", "age": 30, "doctor_id": "D1",
        })


async def test_create_doctor(client):
    resp = await client.post("/api/v1/doctors", json=_DOCTOR)
    assert resp.status_code == 201
    assert resp.json() == {
        "operation": "add_doctor", "outcome": "created", "key": "D1",
        "affected_rows": 1, "upsert": None,
    }


async def test_duplicate_doctor_is_400(client):
    await client.post("/api/v1/doctors", json=_DOCTOR)
    resp = await client.post("/api/v1/doctors", json=_DOCTOR)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


async def test_patient_with_unknown_doctor_is_422(client):
    resp = await client.post("/api/v1/patients", json={
        "id": "P1", "name": "n", "address": "a", "age": 30, "doctor_id": "D404",
    })
    assert resp.status_code == 422
    error = resp.json()["error"]
    assert error["code"] == "REFERENCE_NOT_FOUND"
    assert error["context"]["entity"] == "doctor"
    assert error["context"]["operation"] == "add_patient"


async def test_last_patient_deletion_is_409(client):
    await _add_doctor_with_patients(client, "P1", "P2")
    assert (await client.delete("/api/v1/patients/P1")).status_code == 200
    resp = await client.delete("/api/v1/patients/P2")
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "INVARIANT_VIOLATION"


async def test_doctor_with_patients_deletion_is_409(client):
    await _add_doctor_with_patients(client, "P1")
    resp = await client.delete("/api/v1/doctors/D1")
    assert resp.status_code == 409


async def test_update_missing_doctor_is_404(client):
    resp = await client.put("/api/v1/doctors/D404", json={
        "name": "n", "specialty": "s", "years_of_experience": 1,
    })
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


async def test_malformed_body_is_constraint_violation(client):
    resp = await client.post("/api/v1/doctors", json={**_DOCTOR, "years_of_experience": -3})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "CONSTRAINT_VIOLATION"
    assert "years_of_experience" in error["message"]
    assert [d["field"] for d in error["details"]] == ["years_of_experience"]


async def test_non_integer_path_key_names_path_field(client):
    resp = await client.delete("/api/v1/pharmacies/not-a-number")
    assert resp.status_code == 400
    assert resp.json()["error"]["details"][0]["field"] == "path.pharmacy_id"
