import os

# konfiguracja musi byc ustawiona przed importem order_api
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from order_api.data.database import Base, SessionLocal, engine
from order_api.main import app
from order_api.services.token_service import TokenService
from order_api.services.user_service import hash_password
from order_api.repos.user_repo import UserRepo
import order_api.data.models  # noqa: F401


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token_service():
    return TokenService()


@pytest.fixture
def make_user(db):
    def _make(email="jan@kowalski.pl", password="haslo123", first_name="Jan", last_name="Kowalski"):
        return UserRepo(db).insert(first_name, last_name, email, hash_password(password))

    return _make


def _register(client, email, password="haslo123"):
    return client.post(
        "/api/v1/auth/register",
        json={
            "first_name": "Jan",
            "last_name": "Kowalski",
            "email": email,
            "password": password,
        },
    )


@pytest.fixture
def register_user(client):
    def _register_user(email="jan@kowalski.pl", password="haslo123"):
        return _register(client, email, password)

    return _register_user


@pytest.fixture
def auth_headers(client):
    def _headers(email="jan@kowalski.pl"):
        resp = _register(client, email)
        assert resp.status_code == 200, resp.text
        return {"access_token": resp.json()["token"]}

    return _headers
