# tests/conftest.py

"""Pytest configuration and fixtures."""

from typing import Generator

import pytest
from scoreforge.db.models import Base
from scoreforge.storage.memory import MemoryStore
from scoreforge.storage.sql import SqlKeyValueStore
from sqlalchemy import Engine, create_engine

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def memory_store() -> MemoryStore:
    """Fixture to provide an empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fixture to create and tear down an in-memory test database."""
    test_engine = create_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def sql_store(engine: Engine) -> Generator[SqlKeyValueStore, None, None]:
    """Fixture to provide a SQL-backed store on the in-memory database."""
    store = SqlKeyValueStore(engine=engine)
    yield store
    store.close()


@pytest.fixture
def database_url(tmp_path) -> str:
    """Fixture to provide a file-backed SQLite URL that outlives a store."""
    return f"sqlite:///{tmp_path / 'scores.db'}"


@pytest.fixture(params=["memory", "sql"])
def store(request, memory_store: MemoryStore, engine: Engine):
    """Fixture that runs a test once against each store implementation."""
    if request.param == "memory":
        yield memory_store
        return
    sql = SqlKeyValueStore(engine=engine)
    yield sql
    sql.close()
