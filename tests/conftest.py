import os
import tempfile

# Must be set before expense_tracker.config is imported
_db_dir = tempfile.mkdtemp(prefix="expense-tracker-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"

import pytest
from fastapi.testclient import TestClient

from expense_tracker.database import Base, SessionLocal, engine
from expense_tracker.main import app
from expense_tracker.service import ExpenseService
from expense_tracker.store import ExpenseStore


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return ExpenseStore(db)


@pytest.fixture
def service(store):
    return ExpenseService(store)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def coffee():
    return {"description": "Coffee", "amount": 3.5, "category": "Food", "date": "2024-01-05"}


@pytest.fixture
def tea():
    return {"description": "Tea", "amount": 2.5, "category": "Food", "date": "2024-01-06"}
