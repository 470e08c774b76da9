from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient

from minilink.core.config import Settings
from minilink.db.mongodb import init_mongo_indexes
from minilink.main import create_app

SECRET = "tests-secret-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongodb_uri="mongodb://unused",
        mongodb_db="minilink_tests",
        jwt_secret_key=SECRET,
    )


@pytest.fixture
def database():
    db = mongomock.MongoClient()["minilink_tests"]
    init_mongo_indexes(db)
    return db


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, name: str, email: str, password: str) -> dict:
    response = client.post(
        "/api/auth/user/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
