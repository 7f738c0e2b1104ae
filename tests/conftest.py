"""
Fixtures compartidas: base SQLite en archivo temporal por test,
sesión, datos semilla y cliente HTTP con get_db sobrescrito.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.config.database import build_engine, get_db
from app.main import app
from app.shared.database.models import Base, Customer, Product


@pytest.fixture
def engine(tmp_path):
    test_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Cliente 1 y productos 5 y 7, como en los escenarios de venta"""
    db.add_all([
        Customer(id=1, name="Ana", email="ana@example.com"),
        Customer(id=2, name="Bruno", email="bruno@example.com"),
        Product(id=5, name="Teclado", price=Decimal("10.00"), stock=50),
        Product(id=6, name="Mouse", price=Decimal("4.50"), stock=30),
        Product(id=7, name="Cable", price=Decimal("9.50"), stock=100),
    ])
    db.commit()
    return db


@pytest.fixture
def client(session_factory, seeded):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
