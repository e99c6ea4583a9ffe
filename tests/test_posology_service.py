import pytest

from sismed.core.errors import ConstraintViolation
from sismed.schemas.posology import PosologyCreate, PosologyUpdate
from sismed.services.posology_service import (
    create_posology,
    delete_posology,
    list_posologies,
    update_posology,
)


def _texts(db):
    return [p.text for p in list_posologies(db)]


def test_list_ordered_by_text(db):
    texts = _texts(db)
    assert texts == sorted(texts)


def test_create_normalizes(db):
    create_posology(db, payload=PosologyCreate(text="2 gotas ao deitar"))
    assert "2 GOTAS AO DEITAR" in _texts(db)


def test_duplicate_text_rejected(db):
    with pytest.raises(ConstraintViolation):
        create_posology(db, payload=PosologyCreate(text="conforme orientação médica"))


def test_update_and_delete(db):
    posology_id = create_posology(db, payload=PosologyCreate(text="1 gota"))

    assert update_posology(db, posology_id, payload=PosologyUpdate(text="2 gotas")) == 1
    assert "2 GOTAS" in _texts(db)
    assert "1 GOTA" not in _texts(db)

    assert delete_posology(db, posology_id) == 1
    assert "2 GOTAS" not in _texts(db)


def test_missing_id_is_noop(db):
    before = _texts(db)

    assert update_posology(db, 999, payload=PosologyUpdate(text="nada")) == 0
    assert delete_posology(db, 999) == 0
    assert _texts(db) == before
