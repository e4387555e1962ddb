import os
import tempfile

import pytest

# Point the engine at a throwaway SQLite file before backend.* is imported
_TMP_DIR = tempfile.mkdtemp(prefix="material-orders-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from backend.app.db.base import Base  # noqa: E402
from backend.app.db.session import SessionLocal, engine  # noqa: E402
from backend.app.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema for every test; dropped afterwards."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Session:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client():
    c = TestClient(app)
    try:
        yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def order_payload():
    return {
        "materialId": "MAT-100",
        "itemDescription": "Portland cement 25kg",
        "supplier": "Island Building Supplies",
        "quantity": 10,
        "unitOfMeasurement": "bag",
        "unitPrice": 2.50,
        "totalPrice": 25.00,
        "orderDate": "2026-03-01",
        "items": [{"lot": "A1", "count": 10}],
    }
