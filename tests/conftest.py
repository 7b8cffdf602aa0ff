import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from md_to_html.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_in_memory_stores(tmp_path, monkeypatch):
    # Ensure deterministic tests across runs.
    from md_to_html import config
    from md_to_html.services import input_layer

    # Use a temp data dir for persisted uploads in tests
    monkeypatch.setattr(config, "DATA_DIR", str(tmp_path))

    input_layer._upload_store.clear()
    yield
