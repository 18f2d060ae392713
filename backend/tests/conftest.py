import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import reminder_app.models  # noqa: F401
from reminder_app.core.database import engine
from reminder_app.main import app
from reminder_app.services import auth as auth_service


@pytest.fixture(autouse=True)
def fresh_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def alice(session):
    token = auth_service.register(session, "alice@x.com", "pw123456")
    return auth_service.verify(token)


@pytest.fixture
def bob(session):
    token = auth_service.register(session, "bob@x.com", "hunter22")
    return auth_service.verify(token)


class RecordingNotifier:
    def __init__(self, granted: bool = True, fail: bool = False):
        self.granted = granted
        self.fail = fail
        self.permission_requests = 0
        self.shown: list[tuple[str, str]] = []

    def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.granted

    def show(self, title: str, body: str) -> None:
        if self.fail:
            raise RuntimeError("display unavailable")
        self.shown.append((title, body))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def loop():
    import asyncio

    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def notifier_cls():
    return RecordingNotifier
