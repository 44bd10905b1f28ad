# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session


@pytest.fixture()
def db(database) -> Session:
    """
    Per-test SQLAlchemy Session bound to a transaction (rolled back after each test).
    """
    database.connect()
    connection = database.engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()
