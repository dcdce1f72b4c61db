import pytest
from fastapi.testclient import TestClient

from golinks.main import create_app
from golinks.store import LinkStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "golinks" / "db.sqlite"


@pytest.fixture
def store(db_path):
    store = LinkStore(db_path, timeout=5)
    store.init()
    yield store
    store.close()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture(autouse=True)
def golinks_home(tmp_path, monkeypatch):
    monkeypatch.setenv("GOLINKS_HOME", str(tmp_path / "home"))
    return tmp_path / "home"
