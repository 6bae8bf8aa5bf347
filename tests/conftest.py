import os
from typing import Callable, Generator, Iterator

import pytest

os.environ.setdefault("DATABASE_ALLOW_NON_POSTGRES", "1")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("DATABASE_URL", os.getenv("DATABASE_URL", os.environ["TEST_DATABASE_URL"]))
os.environ.setdefault("AUTH_JWT_SECRET", "unit-test-signing-secret-0123456789abcdef")
# Keep Argon2 cheap under test.
os.environ.setdefault("AUTH_ARGON2_TIME_COST", "1")
os.environ.setdefault("AUTH_ARGON2_MEMORY_COST", "8192")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

import database as database_module  # noqa: E402
from database import Base, build_engine, get_db  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "postgres: requires a PostgreSQL database")


def _resolve_test_database_url(tmp_path) -> str:
    candidate = os.getenv("TEST_DATABASE_URL") or ""
    if candidate.lower().startswith("postgresql"):
        return candidate
    # A file database lets threaded tests open real, separate connections.
    return f"sqlite+pysqlite:///{tmp_path / 'test.db'}"


@pytest.fixture()
def engine(tmp_path) -> Generator[Engine, None, None]:
    import models  # noqa: F401  registers model metadata

    test_engine = build_engine(_resolve_test_database_url(tmp_path))
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine, monkeypatch: pytest.MonkeyPatch) -> sessionmaker:
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    monkeypatch.setattr(database_module, "SessionLocal", factory)
    return factory


@pytest.fixture()
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def api_client(session_factory: sessionmaker) -> Iterator[TestClient]:
    from web.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    try:
        yield client
    finally:
        client.close()
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., object]:
    from services import user_service

    def _make(email: str = "owner@example.com", display_name: str = "Owner", password: str = "Abcdef1!"):
        user_id = user_service.create_user(db_session, email=email, password=password, display_name=display_name)
        return user_service.find_user_by_id(db_session, user_id)

    return _make
