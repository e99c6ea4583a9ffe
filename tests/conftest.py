import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from sismed.core.config import Settings
from sismed.core.database import open_store
from sismed.main import create_app
from sismed.models import Medicine


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data", _env_file=None)


@pytest.fixture
def store(settings):
    store = open_store(settings)
    yield store
    store.close()


@pytest.fixture
def db(store):
    with store.session() as session:
        yield session


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def diazepam_5mg_id(db):
    return db.scalar(select(Medicine.id).where(Medicine.name == "DIAZEPAM", Medicine.dosage == "5MG"))
