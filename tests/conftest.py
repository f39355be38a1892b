"""Test fixtures: a real SQLite-backed key-value store per test."""
from __future__ import annotations

import asyncio
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from db.database import Base, create_db_engine, get_store
from db.kv_store import SqlKeyValueStore, StorageError
from models.kv_entry import KeyValueEntry  # noqa: F401
from schemas.plant import PlantCreate
from services.plant_store import PlantStore


class FailingKeyValueStore(SqlKeyValueStore):
    """Backend whose reads and/or writes can be switched to fail."""

    def __init__(self, session_factory, fail_reads: bool = False, fail_writes: bool = False):
        super().__init__(session_factory)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    async def get(self, key):
        if self.fail_reads:
            raise StorageError(f"cannot read {key}")
        return await super().get(key)

    async def set(self, key, value):
        if self.fail_writes:
            raise StorageError(f"cannot write {key}")
        await super().set(key, value)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'plants.db'}", echo=False)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def backend(session_factory) -> SqlKeyValueStore:
    return SqlKeyValueStore(session_factory)


@pytest.fixture
def failing_backend(session_factory) -> FailingKeyValueStore:
    return FailingKeyValueStore(session_factory)


@pytest.fixture
def store(backend) -> PlantStore:
    s = PlantStore(backend)
    asyncio.run(s.load())
    return s


@pytest.fixture
def plant_data() -> Callable[..., PlantCreate]:
    def _make(**overrides) -> PlantCreate:
        fields = {"name": "Monstera", "species": "Monstera deliciosa", "category": "foliage"}
        fields.update(overrides)
        return PlantCreate(**fields)

    return _make


@pytest.fixture
def client(store):
    # lifespan は走らせず、テスト用ストアを差し込む
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
