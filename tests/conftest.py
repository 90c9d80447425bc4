# tests/conftest.py

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from database import SessionLocal, get_db_engine  # noqa: E402
from main import app  # noqa: E402
from models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    engine = get_db_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def token_service():
    return app.state.token_service


@pytest.fixture()
def register(client):
    """
    Signs up and signs in a user, returning ready-to-use auth headers.
    """
    def _register(email="a@x.com", password="p1", name="A"):
        res = client.post("/signup", json={"email": email, "password": password, "name": name})
        assert res.status_code == 201
        res = client.post("/signin", json={"email": email, "password": password})
        assert res.status_code == 200
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _register
