import base64

import pytest
from fastapi.testclient import TestClient

from sismed.core.config import Settings
from sismed.core.errors import StorageUnavailable
from sismed.main import create_app

API = "/api/v1"

ANA = {"name": "ana silva", "national_id": "123", "birth_date": "2000-01-01"}


def _diazepam_5mg(client):
    medicines = client.get(f"{API}/medicines").json()
    return next(m for m in medicines if m["name"] == "DIAZEPAM" and m["dosage"] == "5MG")


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_and_list_patients(client):
    resp = client.post(f"{API}/patients", json=ANA)
    assert resp.status_code == 201
    assert resp.json() == {"id": 1}

    assert client.get(f"{API}/patients").json() == [
        {"id": 1, "name": "ANA SILVA", "national_id": "123", "birth_date": "2000-01-01"},
    ]


def test_duplicate_patient_reports_constraint(client):
    client.post(f"{API}/patients", json={**ANA, "national_id": "ab"})

    resp = client.post(f"{API}/patients", json={**ANA, "national_id": "AB"})

    assert resp.status_code == 409
    assert "UNIQUE constraint failed" in resp.json()["detail"]


def test_invalid_patient_payload(client):
    resp = client.post(f"{API}/patients", json={**ANA, "name": " "})
    assert resp.status_code == 422


def test_update_and_delete_missing_are_noops(client):
    resp = client.put(f"{API}/medicines/9999", json={"name": "x", "dosage": "1mg", "form": "gota", "controlled": 0})
    assert resp.status_code == 200
    assert resp.json() == {"rows_affected": 0}

    resp = client.delete(f"{API}/posologies/9999")
    assert resp.status_code == 200
    assert resp.json() == {"rows_affected": 0}


def test_prescription_flow(client):
    diazepam = _diazepam_5mg(client)
    client.post(f"{API}/patients", json=ANA)

    resp = client.post(f"{API}/prescriptions", json={"patient_id": 1, "date": "2024-01-01"})
    assert resp.json() == {"id": 1}

    resp = client.post(
        f"{API}/prescriptions/1/medicines",
        json={"prescription_id": 1, "medicine_id": diazepam["id"], "instructions": "1 ao dia"},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 1}

    body = client.get(f"{API}/prescriptions/1").json()
    assert body["prescription"] == {"id": 1, "patient_id": 1, "date": "2024-01-01", "notes": None}
    assert body["medicines"] == [
        {
            "id": 1,
            "prescription_id": 1,
            "medicine_id": diazepam["id"],
            "instructions": "1 AO DIA",
            "name": "DIAZEPAM",
            "dosage": "5MG",
            "form": "COMPRIMIDO",
            "controlled": 1,
        }
    ]
    assert client.get(f"{API}/prescriptions/1/medicines").json() == body["medicines"]
    assert [p["id"] for p in client.get(f"{API}/patients/1/prescriptions").json()] == [1]


def test_unknown_prescription_is_404(client):
    resp = client.get(f"{API}/prescriptions/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Prescription 999 not found"}


def test_delete_patient_cascades(client):
    client.post(f"{API}/patients", json=ANA)
    client.post(f"{API}/prescriptions", json={"patient_id": 1, "date": "2024-01-01"})

    assert client.delete(f"{API}/patients/1").json() == {"rows_affected": 1}

    assert client.get(f"{API}/patients/1/prescriptions").json() == []
    assert client.get(f"{API}/prescriptions/1").status_code == 404


def test_save_pdf(client, tmp_path):
    data = b"%PDF-1.4 test"
    resp = client.post(
        f"{API}/files/pdf",
        json={
            "data": base64.b64encode(data).decode(),
            "filename": "receita.pdf",
            "target_path": str(tmp_path),
        },
    )

    assert resp.status_code == 200
    assert (tmp_path / "receita.pdf").read_bytes() == data
    assert resp.json() == {"path": str((tmp_path / "receita.pdf").resolve())}


def test_cancelled_dialog_is_reported(client):
    resp = client.post(f"{API}/files/backup", json={"target_path": None})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Operation cancelled"}


def test_backup_and_database_path(client, settings, tmp_path):
    path = client.get(f"{API}/files/database-path").json()["path"]
    assert path == str(settings.database_path.resolve())

    resp = client.post(f"{API}/files/backup", json={"target_path": str(tmp_path)})
    assert resp.json() == {"path": str((tmp_path / settings.backup_filename).resolve())}


def test_startup_fails_without_store(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    app = create_app(Settings(data_dir=blocker / "data", _env_file=None))

    with pytest.raises(StorageUnavailable):
        with TestClient(app):
            pass


def test_restore_through_api(client, tmp_path):
    client.post(f"{API}/patients", json=ANA)
    backup = client.post(f"{API}/files/backup", json={"target_path": str(tmp_path / "copy.db")}).json()["path"]
    client.delete(f"{API}/patients/1")
    assert client.get(f"{API}/patients").json() == []

    resp = client.post(f"{API}/files/restore", json={"source_path": backup})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Data restored successfully. Restart the application."}
    assert [p["name"] for p in client.get(f"{API}/patients").json()] == ["ANA SILVA"]


def test_restore_cancelled_through_api(client):
    resp = client.post(f"{API}/files/restore", json={"source_path": None})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Operation cancelled"}
