import os
import shutil
import tempfile

# Point storage at a scratch directory before the app (and config) are imported
_TMP_DIR = tempfile.mkdtemp(prefix="car-api-tests-")
os.environ["DATA_FILE"] = os.path.join(_TMP_DIR, "cars.json")
os.environ["PUBLIC_DIR"] = os.path.join(_TMP_DIR, "public")

import pytest
from fastapi.testclient import TestClient

from main import app
from app.database.db import InMemoryCarStore, JsonFileCarStore, get_car_store


@pytest.fixture(scope="session", autouse=True)
def scratch_dir():
    yield _TMP_DIR
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture
def store():
    return InMemoryCarStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_car_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileCarStore(str(tmp_path / "cars.json"))


@pytest.fixture
def file_client(file_store):
    app.dependency_overrides[get_car_store] = lambda: file_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def corolla():
    return {"make": "Toyota", "model": "Corolla", "year": "2020", "price": "20000"}
