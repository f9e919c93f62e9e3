"""Global test fixtures."""

import itertools
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from vault.config import DatabaseConfig
from vault.domain.record.service.identity import IdentityGenerator
from vault.domain.record.service.repository import RecordRepository
from vault.domain.record.service.vault import VaultService
from vault.infrastructure.backup.snapshotter import JsonFileSnapshotter
from vault.infrastructure.event.memory_bus import InMemoryEventBus
from vault.infrastructure.persistence.collection import SqlRecordCollection
from vault.infrastructure.persistence.database import create_db_engine, create_schema


@pytest_asyncio.fixture
async def engine():
    """Per-test in-memory SQLite engine with the schema in place."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def collection(engine: AsyncEngine) -> SqlRecordCollection:
    return SqlRecordCollection(engine)


@pytest.fixture
def repository(collection: SqlRecordCollection) -> RecordRepository:
    return RecordRepository(collection=collection, ids=IdentityGenerator(collection))


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock that moves one second forward per call, so snapshot names never collide."""
    start = datetime(2024, 5, 1, 12, 0, 0)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def backup_dir(tmp_path: Path) -> Path:
    return tmp_path / "backups"


@pytest.fixture
def snapshotter(backup_dir: Path, ticking_clock: Callable[[], datetime]) -> JsonFileSnapshotter:
    return JsonFileSnapshotter(backup_dir, clock=ticking_clock)


@pytest.fixture
def vault_service(
    repository: RecordRepository,
    event_bus: InMemoryEventBus,
    snapshotter: JsonFileSnapshotter,
) -> VaultService:
    return VaultService(
        repository=repository,
        event_bus=event_bus,
        snapshotter=snapshotter,
    )
