import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from famfin.core.security import create_access_token
from famfin.database import get_session
from famfin.main import app
from famfin.models import User


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(session, email, display_name=None):
    user = User(email=email, hashed_password="not-used", display_name=display_name)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def headers_for(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(session):
    return make_user(session, "asha@example.com", display_name="Asha")


@pytest.fixture
def auth_headers(owner):
    return headers_for(owner)
