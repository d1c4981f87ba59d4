"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from repokit.database.schema import create_all
from sample_schema import Order, User


@pytest.fixture
def engine():
    """In-memory SQLite engine with the sample schema."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    """Create a temporary in-memory database session for testing."""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(session):
    """
    Three users and six orders.

    user 7 (Alice Smith): orders 1, 2, 3 (order 3 invalid)
    user 8 (Bob Smithers): orders 4, 5
    user 9 (Carol Jones, no email): order 6
    """
    session.add_all(
        [
            User(id=7, name="Alice Smith", email="alice@example.com"),
            User(id=8, name="Bob Smithers", email="bob@example.com"),
            User(id=9, name="Carol Jones", email=None),
        ]
    )
    session.add_all(
        [
            Order(id=1, user_id=7, total=50.0, discount=5.0, note="first", tags_json='["gift"]',
                  is_valid=1, created_at=datetime(2024, 3, 15, 9, 30, 0)),
            Order(id=2, user_id=7, total=150.0, discount=None, note=None, tags_json='["gift", "rush"]',
                  is_valid=1, created_at=datetime(2024, 3, 20, 14, 0, 0)),
            Order(id=3, user_id=7, total=300.0, discount=300.0, note="cancelled", tags_json="[]",
                  is_valid=0, created_at=datetime(2024, 4, 2, 18, 45, 0)),
            Order(id=4, user_id=8, total=20.0, discount=1.0, note=None, tags_json=None,
                  is_valid=1, created_at=datetime(2023, 12, 31, 23, 59, 0)),
            Order(id=5, user_id=8, total=500.0, discount=50.0, note="bulk", tags_json='["a", "b", "c"]',
                  is_valid=1, created_at=datetime(2024, 3, 15, 12, 0, 0)),
            Order(id=6, user_id=9, total=75.0, discount=None, note=None, tags_json=None,
                  is_valid=1, created_at=datetime(2024, 5, 1, 8, 0, 0)),
        ]
    )
    session.commit()
    return session
