"""Shared fixtures: in-memory SQLite database, service and TestClient."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from funcionarios.core.config import Settings
from funcionarios.db import Database
from funcionarios.main import create_app
from funcionarios.service import EmployeeService


def make_database() -> Database:
    # StaticPool: uma única conexão compartilhada, senão cada conexão veria um banco vazio
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database = Database(engine)
    database.create_tables()
    return database


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, DATABASE_URL="sqlite://", ENVIRONMENT="production")


@pytest.fixture
def database():
    database = make_database()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def service(db_session) -> EmployeeService:
    return EmployeeService(db_session)


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database=database)
    with TestClient(app) as c:
        yield c
