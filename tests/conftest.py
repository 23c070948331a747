import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from bloglist.core.auth import get_password_hash
from bloglist.database import SessionLocal, reset_db
from bloglist.main import app
from bloglist.models import Blog, User
from helper import INITIAL_BLOGS


@pytest.fixture(autouse=True)
def seeded_db():
    reset_db()
    db = SessionLocal()
    db.add_all(Blog(**blog) for blog in INITIAL_BLOGS)
    db.add(User(username="root", name="Superuser", password_hash=get_password_hash("sekred")))
    db.commit()
    db.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def root_token(client):
    res = client.post("/api/login", json={"username": "root", "password": "sekred"})
    assert res.status_code == 200
    return res.json()["token"]
