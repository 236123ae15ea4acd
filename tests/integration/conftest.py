"""PostgreSQL fixtures for integration tests (require testcontainers + Docker)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sample_models import Base
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session


@pytest.fixture(scope="session")
def engine() -> Iterator[Engine]:
    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer("postgres:16-alpine", driver="psycopg")
    try:
        container.start()
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"PostgreSQL container unavailable: {exc}")
    try:
        engine = create_engine(container.get_connection_url())
        Base.metadata.create_all(engine)
        yield engine
        engine.dispose()
    finally:
        container.stop()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
