"""Pytest fixtures for employee record store tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from employee_records.api.app import create_app
from employee_records.storage import FileStorage, MemoryStorage, SqlStorage, Storage


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty data directory for the file engine."""
    return tmp_path / "data"


@pytest.fixture
def file_storage(data_dir: Path) -> FileStorage:
    """File engine seeded with sample data on a fresh directory."""
    return FileStorage(data_dir)


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Seeded in-memory engine."""
    return MemoryStorage(seed=True)


@pytest.fixture
def sql_storage(tmp_path: Path) -> Iterator[SqlStorage]:
    """Seeded SQLite engine on a temporary database file."""
    storage = SqlStorage(f"sqlite:///{tmp_path / 'storage.db'}")
    yield storage
    storage.close()


@pytest.fixture(params=["memory", "file", "sql"])
def storage(request: pytest.FixtureRequest) -> Storage:
    """Every engine, for contract tests."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest_asyncio.fixture
async def client(file_storage: FileStorage) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app backed by a temporary file engine."""
    app = create_app(storage=file_storage)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
