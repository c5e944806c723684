"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database; nothing touches the
configured PostgreSQL instance and no test calls the real text service.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.api.dependencies import get_generator
from app.db.session import get_db
from app.main import app as fastapi_app

GOOD_NOTE = (
    "Solid week. Your mileage built steadily and stress stayed moderate. "
    "Keep sleep consistent ahead of the weekend long run."
)


class FakeGenerator:
    """Text generator returning canned responses in order.

    The last response repeats once the list is exhausted.  Exceptions in
    the list are raised instead of returned.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [GOOD_NOTE]
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def good_note():
    return GOOD_NOTE


@pytest.fixture
def make_generator():
    return FakeGenerator


@pytest.fixture
def generator():
    return FakeGenerator(GOOD_NOTE)


@pytest.fixture
def client(engine, generator):
    def _get_db():
        with Session(engine) as db:
            yield db

    fastapi_app.dependency_overrides[get_db] = _get_db
    fastapi_app.dependency_overrides[get_generator] = lambda: generator
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()
