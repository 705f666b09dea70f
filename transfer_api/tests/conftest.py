import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from ..core.db import create_engine_for_url, get_session, set_engine
from ..demo import app as demo_app
from ..main import app


@pytest.fixture
def engine(tmp_path):
    test_db = tmp_path / "test.db"
    engine = create_engine_for_url(f"sqlite:///{test_db}")
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine) -> TestClient:
    set_engine(engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    set_engine(None)


@pytest.fixture
def demo_client() -> TestClient:
    with TestClient(demo_app) as test_client:
        yield test_client
