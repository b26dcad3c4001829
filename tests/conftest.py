"""Shared fixtures.

Every test gets a fresh in-memory SQLite database.  ``StaticPool`` keeps
a single connection so the schema survives across sessions and the
TestClient's worker thread.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.db.session import get_db
from app.main import app
from app.models.partner import FitnessLevel, Partner, Sex, WeightUnit


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_partner(session):
    """Factory inserting a partner; profile fields default to the seeded 'Obed'."""

    def _make(name: str = "Obed", **overrides) -> Partner:
        fields = dict(name=name, weight=181, weight_unit=WeightUnit.LB, sex=Sex.MALE, age=28,
                      fitness_level=FitnessLevel.INTERMEDIATE, )
        fields.update(overrides)
        partner = Partner(**fields)
        session.add(partner)
        session.commit()
        session.refresh(partner)
        return partner

    return _make
