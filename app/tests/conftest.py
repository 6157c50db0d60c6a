import json

import pytest
from fastapi.testclient import TestClient

from app.application.catalog import CatalogService
from app.infrastructure.catalog import get_catalog_service
from app.infrastructure.store.json_file_store import JsonFileCatalogStore
from app.main import app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "videos.json"


@pytest.fixture
def store(data_file):
    return JsonFileCatalogStore(data_file)


@pytest.fixture
def service(store):
    return CatalogService(store)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_catalog_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def seed(data_file):
    """Write a catalog document straight to disk."""
    def _seed(catalog):
        data_file.write_text(json.dumps(catalog), encoding="utf-8")
        return catalog
    return _seed


@pytest.fixture
def read_back(data_file):
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read
