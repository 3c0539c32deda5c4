"""Key-value record store engine backed by SQLAlchemy.

Each record is one row of the ``record`` table keyed by (collection, id),
with the JSON-ready record in ``data``. A mutation writes only the row it
touches, in its own transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import JSON, String, create_engine, delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from employee_records.models import (
    COLLECTION_KEYS,
    EMPLOYEES_KEY,
    RECORD_TYPES,
    ChildRecord,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    RecordModel,
    ResourceKind,
)
from employee_records.storage.base import (
    RecordNotFoundError,
    Storage,
    StorageData,
    build_employee,
    build_record,
    patch_employee,
    patch_record,
)
from employee_records.storage.seed import sample_data

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for ORM tables."""


class RecordRow(Base):
    """One stored record of any collection."""

    __tablename__ = "record"

    collection: Mapped[str] = mapped_column(String, primary_key=True)
    id: Mapped[str] = mapped_column(String, primary_key=True)
    employee_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)


class SqlStorage(Storage):
    """Storage engine keeping records as JSON rows in a SQL database.

    An empty database is seeded with the same sample data as the file
    engine unless ``seed`` is False.
    """

    backend = "sql"

    def __init__(
        self,
        database_url: str = "sqlite:///:memory:",
        *,
        seed: bool = True,
        engine: Engine | None = None,
    ) -> None:
        self._engine = engine or create_engine(database_url)
        Base.metadata.create_all(self._engine)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)
        if seed and self._is_empty():
            self._seed()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Get a session that commits on success and rolls back on error."""
        with self._session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def _is_empty(self) -> bool:
        with self._session() as session:
            return not session.scalar(select(func.count()).select_from(RecordRow))

    def _seed(self) -> None:
        logger.info("Empty database, initializing with sample data")
        with self._session() as session:
            for key, records in sample_data().items():
                for record_id, data in records.items():
                    session.add(
                        RecordRow(
                            collection=key,
                            id=record_id,
                            employee_id=data.get("employeeId"),
                            data=data,
                        )
                    )

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    # Employees

    def get_employee(self, employee_id: str) -> Employee | None:
        with self._session() as session:
            row = session.get(RecordRow, (EMPLOYEES_KEY, employee_id))
            return Employee.model_validate(row.data) if row else None

    def list_employees(self) -> list[Employee]:
        with self._session() as session:
            rows = session.scalars(
                select(RecordRow).where(RecordRow.collection == EMPLOYEES_KEY).order_by(RecordRow.id)
            )
            return [Employee.model_validate(row.data) for row in rows]

    def create_employee(self, payload: EmployeeCreate) -> Employee:
        employee = build_employee(payload)
        with self._session() as session:
            session.add(RecordRow(collection=EMPLOYEES_KEY, id=employee.id, data=employee.to_dict()))
        return employee

    def update_employee(self, employee_id: str, patch: EmployeeUpdate) -> Employee:
        with self._session() as session:
            row = session.get(RecordRow, (EMPLOYEES_KEY, employee_id))
            if row is None:
                raise RecordNotFoundError("Employee", employee_id)
            updated = patch_employee(Employee.model_validate(row.data), patch)
            row.data = updated.to_dict()
        return updated

    def delete_employee(self, employee_id: str) -> None:
        self._delete_row(EMPLOYEES_KEY, employee_id)

    # Child collections

    def list_records(self, kind: ResourceKind, employee_id: str) -> list[ChildRecord]:
        model = RECORD_TYPES[kind].model
        with self._session() as session:
            rows = session.scalars(
                select(RecordRow)
                .where(RecordRow.collection == kind.value, RecordRow.employee_id == employee_id)
                .order_by(RecordRow.id)
            )
            return [model.model_validate(row.data) for row in rows]

    def create_record(self, kind: ResourceKind, payload: RecordModel) -> ChildRecord:
        record = build_record(RECORD_TYPES[kind], payload)
        with self._session() as session:
            session.add(
                RecordRow(
                    collection=kind.value,
                    id=record.id,
                    employee_id=record.employee_id,
                    data=record.to_dict(),
                )
            )
        return record

    def update_record(
        self, kind: ResourceKind, record_id: str, patch: RecordModel
    ) -> ChildRecord:
        record_type = RECORD_TYPES[kind]
        with self._session() as session:
            row = session.get(RecordRow, (kind.value, record_id))
            if row is None:
                raise RecordNotFoundError(record_type.label, record_id)
            updated = patch_record(record_type, record_type.model.model_validate(row.data), patch)
            row.employee_id = updated.employee_id
            row.data = updated.to_dict()
        return updated

    def delete_record(self, kind: ResourceKind, record_id: str) -> None:
        self._delete_row(kind.value, record_id)

    def _delete_row(self, collection: str, record_id: str) -> None:
        with self._session() as session:
            session.execute(
                delete(RecordRow).where(
                    RecordRow.collection == collection, RecordRow.id == record_id
                )
            )

    def snapshot(self) -> StorageData:
        data: StorageData = {key: {} for key in COLLECTION_KEYS}
        with self._session() as session:
            for row in session.scalars(select(RecordRow)):
                data.setdefault(row.collection, {})[row.id] = row.data
        return data
