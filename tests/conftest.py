from collections.abc import Generator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pathoreport.database import Base, get_db
from pathoreport.main import app
from pathoreport.routers.deps import get_now
from pathoreport.seed.sample_reports import SAMPLE_REPORTS
from pathoreport.services.migrator import migrate_all
from pathoreport.services.storage import InMemoryKeyValueProvider, ReportStore, SqlKeyValueProvider

FIXED_NOW = datetime(2024, 1, 20, 15, 0, tzinfo=timezone.utc)


@pytest.fixture()
def db_session() -> Generator:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW

    # Tests use an in-memory DB via dependency override; skip app startup side effects.
    original_startup = list(app.router.on_startup)
    app.router.on_startup.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.router.on_startup[:] = original_startup
    app.dependency_overrides.clear()


@pytest.fixture()
def db_store(db_session) -> ReportStore:
    return ReportStore(SqlKeyValueProvider(db_session))


@pytest.fixture()
def memory_store() -> ReportStore:
    return ReportStore(InMemoryKeyValueProvider(), key="test_reports")


@pytest.fixture()
def sample_reports():
    return migrate_all(SAMPLE_REPORTS)
