"""Database engine creation and schema setup."""

import logging
import os
from pathlib import Path
from typing import Any

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from vault.config import DatabaseConfig
from vault.domain.shared.error import StorageUnavailableError
from vault.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists."""
    if not url.startswith("sqlite") or ":memory:" in url:
        return url

    # Extract path from URL (sqlite+aiosqlite:///path or sqlite:///path)
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]

    # Expand ~ and make absolute
    expanded = os.path.expanduser(path)
    abs_path = os.path.abspath(expanded)

    # Ensure parent directory exists
    parent = Path(abs_path).parent
    parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create async database engine for the SQLite record store."""
    url = _expand_sqlite_path(config.url)
    engine_kwargs: dict[str, Any] = {"echo": config.echo}

    if url.startswith("sqlite"):
        # Use StaticPool for SQLite to allow same connection across threads
        # This is needed for async SQLite with aiosqlite
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    return create_async_engine(url, **engine_kwargs)


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except OperationalError as e:
        raise StorageUnavailableError(f"Cannot prepare record store: {e.orig}") from e
    logger.debug("Database schema ensured")
