"""Shared fixtures: an in-memory database and an API client bound to it."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from app.db import base  # noqa: F401
from app.db.session import build_engine, get_db
from app.main import app


@pytest.fixture
def engine():
    # One shared connection so every session sees the same in-memory database
    engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path):
    # Separate connections per session, for tests that interleave transactions
    engine = build_engine(f"sqlite:///{tmp_path / 'app.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    return {"name": "Ann", "email": "ann@example.com", "password": "secret1"}


@pytest.fixture
def event_payload():
    start = datetime.datetime(2030, 5, 1, 18, 0)
    return {
        "title": "Launch party",
        "description": "Drinks and demos",
        "location": "Main hall",
        "start_time": start.isoformat(),
        "end_time": (start + datetime.timedelta(hours=3)).isoformat(),
    }
