"""
Shared pytest fixtures.

Each test gets a fresh SQLite database file and a recording mock mail
service in place of the configured one.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select, func

from food_ordering.core.config import get_settings
from food_ordering.main import app
from food_ordering.services.notifications import (
    MockNotificationService,
    get_notification_service,
    reset_notification_service,
)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "food_ordering.db"


@pytest.fixture
def mail_service():
    """Mock mail service that never fails."""
    return MockNotificationService(company_name="Test Kitchen")


def _start_client(monkeypatch, database_url, mail_service):
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("ENV_MODE", "development")
    get_settings.cache_clear()
    reset_notification_service()
    app.dependency_overrides[get_notification_service] = lambda: mail_service
    return TestClient(app)


@pytest.fixture
def client(monkeypatch, db_path, mail_service):
    """Test client with lifespan running against a temporary database."""
    with _start_client(monkeypatch, f"sqlite+aiosqlite:///{db_path}", mail_service) as client:
        yield client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
    reset_notification_service()


@pytest.fixture
def offline_client(monkeypatch, tmp_path, mail_service):
    """Test client whose database can never be opened."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nested' / 'db.sqlite'}"
    with _start_client(monkeypatch, url, mail_service) as client:
        yield client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
    reset_notification_service()


@pytest.fixture
def rows(db_path):
    """
    Read rows straight from the test database file.

    Usage: rows(ContactMessage) -> list of records, rows.count(Order) -> int
    """
    engine = create_engine(f"sqlite:///{db_path}")

    class Rows:
        def __call__(self, model):
            with engine.connect() as conn:
                return conn.execute(select(model.__table__).order_by(model.seq)).mappings().all()

        def count(self, model):
            with engine.connect() as conn:
                return conn.execute(select(func.count()).select_from(model.__table__)).scalar()

    yield Rows()
    engine.dispose()


@pytest.fixture
def pizza():
    return {
        "foodName": "Pizza",
        "description": "d",
        "price": "$1",
        "image": "i.jpg",
    }
