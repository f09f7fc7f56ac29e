"""Pytest configuration and fixtures."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from invoice_admin.auth import hash_password
from invoice_admin.db.models import Base, Customer, Invoice, User
from invoice_admin.db.session import get_db_session
from invoice_admin.main import app
from invoice_admin.services.page_cache import PageCache, set_page_cache

DEMO_EMAIL = "user@nextmail.com"
DEMO_PASSWORD = "123456"


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Database session bound to the test engine."""
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def statements(engine) -> list[tuple[str, tuple]]:
    """Write statements (INSERT/UPDATE/DELETE) sent to the database."""
    captured = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().split(" ", 1)[0].upper() in {"INSERT", "UPDATE", "DELETE"}:
            captured.append((statement, tuple(parameters)))

    event.listen(engine, "before_cursor_execute", _capture)
    yield captured
    event.remove(engine, "before_cursor_execute", _capture)


@pytest.fixture(autouse=True)
def page_cache(tmp_path):
    """Page cache in a temp directory, installed as the process-wide cache."""
    cache = PageCache(tmp_path / "page_cache")
    set_page_cache(cache)
    yield cache
    set_page_cache(None)
    cache.close()


@pytest.fixture
def customers(db) -> list[Customer]:
    """Two customers with stable ids."""
    items = [
        Customer(id="c1", name="Delba de Oliveira", email="delba@oliveira.com"),
        Customer(id="c2", name="Lee Robinson", email="lee@robinson.com"),
    ]
    db.add_all(items)
    db.commit()
    return items


@pytest.fixture
def invoice(db, customers) -> Invoice:
    """Pending $15.00 invoice for customer c1."""
    item = Invoice(id="inv1", customer_id="c1", amount=1500, status="pending", date="2024-01-15")
    db.add(item)
    db.commit()
    return item


@pytest.fixture
def user(db) -> User:
    """Admin user with the demo credentials."""
    item = User(id="u1", name="User", email=DEMO_EMAIL, password=hash_password(DEMO_PASSWORD))
    db.add(item)
    db.commit()
    return item


@pytest.fixture
def client(db):
    """Test client using the test session; redirects are not followed."""
    def _get_db():
        yield db

    app.dependency_overrides[get_db_session] = _get_db
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in_client(client, user):
    """Test client holding a signed-in session."""
    response = client.post("/login", data={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 303
    return client
