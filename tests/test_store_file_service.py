import pytest

from sismed.core.errors import Cancelled, IoFailure
from sismed.schemas.patient import PatientCreate
from sismed.services.patient_service import create_patient, delete_patient, list_patients
from sismed.services.store_file_service import (
    RESTORE_DONE_MESSAGE,
    backup_store,
    database_path,
    restore_store,
    save_pdf,
)

PDF_BYTES = b"%PDF-1.4\n%fake\n"


def test_save_pdf_to_file(tmp_path):
    target = tmp_path / "out" / "receita.pdf"

    written = save_pdf(PDF_BYTES, "ignored.pdf", str(target))

    assert written == target.resolve()
    assert target.read_bytes() == PDF_BYTES


def test_save_pdf_into_directory_uses_suggested_name(tmp_path):
    written = save_pdf(PDF_BYTES, "receita_ana", tmp_path)

    assert written == (tmp_path / "receita_ana.pdf").resolve()
    assert written.read_bytes() == PDF_BYTES


@pytest.mark.parametrize("target", [None, "", "   "])
def test_save_pdf_cancelled(target):
    with pytest.raises(Cancelled) as excinfo:
        save_pdf(PDF_BYTES, "receita.pdf", target)
    assert str(excinfo.value) == "Operation cancelled"


def test_save_pdf_io_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(IoFailure):
        save_pdf(PDF_BYTES, "receita.pdf", blocker / "sub" / "receita.pdf")


def test_database_path(store, settings):
    assert database_path(store) == settings.database_path.resolve()


def test_backup_into_directory(store, tmp_path):
    backups = tmp_path / "backups"
    backups.mkdir()

    written = backup_store(store, backups)

    assert written == (backups / "sismed_backup.db").resolve()
    assert written.read_bytes() == store.path.read_bytes()


def test_backup_cancelled(store):
    with pytest.raises(Cancelled):
        backup_store(store, None)


def test_backup_then_restore(store, tmp_path):
    with store.session() as db:
        patient_id = create_patient(
            db,
            payload=PatientCreate(name="ana", national_id="1", birth_date="2000-01-01"),
        )
    backup = backup_store(store, tmp_path / "copy.db")

    with store.session() as db:
        delete_patient(db, patient_id)
        assert list_patients(db) == []

    assert restore_store(store, str(backup)) == RESTORE_DONE_MESSAGE

    with store.session() as db:
        assert [p.name for p in list_patients(db)] == ["ANA"]


def test_restore_missing_file(store, tmp_path):
    with pytest.raises(IoFailure):
        restore_store(store, tmp_path / "missing.db")


def test_restore_cancelled(store):
    with pytest.raises(Cancelled):
        restore_store(store, None)
