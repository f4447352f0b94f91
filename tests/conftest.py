# tests/conftest.py

import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="pastebin-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_dir}/test.db"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from pastebin.crud import users  # noqa: E402
from pastebin.database import SessionLocal, engine  # noqa: E402
from pastebin.main import app  # noqa: E402
from pastebin.models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
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
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice(db):
    return users.create_user(db, "alice", "secret")


@pytest.fixture
def logged_in(client, alice):
    r = client.post(
        "/login",
        data={"username": "alice", "password": "secret"},
        follow_redirects=False,
    )
    assert r.status_code == 303
    return client
