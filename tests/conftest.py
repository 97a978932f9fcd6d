import pytest
from fastapi.testclient import TestClient

from db.seed import build_store, get_store
from main import app


@pytest.fixture()
def store():
    return build_store()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
