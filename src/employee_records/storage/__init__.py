"""Record store engines."""

from __future__ import annotations

from employee_records.config import Settings
from employee_records.storage.base import (
    RecordCollection,
    RecordNotFoundError,
    Storage,
    StorageData,
)
from employee_records.storage.file import FileStorage
from employee_records.storage.memory import MemoryStorage
from employee_records.storage.seed import SAMPLE_EMPLOYEE_ID, sample_data
from employee_records.storage.sql import SqlStorage


def create_storage(settings: Settings) -> Storage:
    """Build the storage engine selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return MemoryStorage(seed=True)
    if settings.storage_backend == "sql":
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return SqlStorage(settings.database_url)
    return FileStorage(settings.data_dir)


__all__ = [
    "FileStorage",
    "MemoryStorage",
    "RecordCollection",
    "RecordNotFoundError",
    "SAMPLE_EMPLOYEE_ID",
    "SqlStorage",
    "Storage",
    "StorageData",
    "create_storage",
    "sample_data",
]
