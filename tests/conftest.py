import pytest
from fastapi.testclient import TestClient
from vod.config import get_settings
from vod.database import create_tables, make_engine, make_session_factory
from vod.main import create_app
from vod.repositories.video_repository import InMemoryVideoStore, SqlVideoStore


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Fresh settings per test; individual tests may set VOD_* env vars before building an app."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def memory_store():
    return InMemoryVideoStore()


@pytest.fixture
def sql_store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    create_tables(bind=engine)
    yield SqlVideoStore(make_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def make_client(settings_env):
    clients = []

    def _make(store, seed=True):
        settings_env.setenv("VOD_SEED_ON_STARTUP", "true" if seed else "false")
        get_settings.cache_clear()
        client = TestClient(create_app(store=store))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)
