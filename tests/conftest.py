import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

# Test environment defaults (read by Settings at import time).
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from product_catalog import models  # noqa: E402,F401
from product_catalog.core.db import Base, create_db_engine  # noqa: E402
from product_catalog.core.deps import get_db  # noqa: E402
from product_catalog.main import app  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """A fresh SQLite database per test, schema created from the models."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def dvd_payload() -> dict:
    return {"sku": "DVD-1", "name": "Matrix", "price": 9.99, "type": "dvd", "size": 700}


@pytest.fixture
def book_payload() -> dict:
    return {"sku": "BOOK-1", "name": "War and Peace", "price": 20, "type": "book", "weight": 1.2}


@pytest.fixture
def furniture_payload() -> dict:
    return {
        "sku": "FUR-1",
        "name": "Chair",
        "price": "40.50",
        "type": "furniture",
        "height": 10,
        "width": 20,
        "length": 30,
    }
