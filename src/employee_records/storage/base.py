"""Storage contract shared by every record store engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from employee_records.models import (
    RECORD_TYPES,
    ChildRecord,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    JobInfoUpdate,
    RecordModel,
    RecordType,
    ResourceKind,
    merge_profile,
)

# Collection key -> record id -> JSON-ready record
StorageData = dict[str, dict[str, dict[str, Any]]]


class RecordNotFoundError(Exception):
    """Raised when an update targets a record id that does not exist."""

    def __init__(self, label: str, record_id: str):
        self.label = label
        self.record_id = record_id
        super().__init__(f"{label} with id {record_id} not found")


class Storage(ABC):
    """CRUD over the employee aggregate and its child collections.

    Updates of a missing id raise ``RecordNotFoundError``; deletes of a
    missing id are a silent no-op. Deleting an employee leaves its child
    records in place.
    """

    backend: str = "abstract"

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    @abstractmethod
    def get_employee(self, employee_id: str) -> Employee | None:
        """Get an employee by id, or None."""

    @abstractmethod
    def list_employees(self) -> list[Employee]:
        """List all employees."""

    @abstractmethod
    def create_employee(self, payload: EmployeeCreate) -> Employee:
        """Insert an employee with a fresh id and timestamps."""

    @abstractmethod
    def update_employee(self, employee_id: str, patch: EmployeeUpdate) -> Employee:
        """Patch an employee; profile data is merged section by section."""

    @abstractmethod
    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee if present."""

    def update_job_info(self, employee_id: str, job_info: JobInfoUpdate) -> Employee:
        """Patch only the job fields of an employee."""
        patch = EmployeeUpdate.model_validate(job_info.model_dump(exclude_unset=True))
        return self.update_employee(employee_id, patch)

    # ------------------------------------------------------------------
    # Child collections
    # ------------------------------------------------------------------

    @abstractmethod
    def list_records(self, kind: ResourceKind, employee_id: str) -> list[ChildRecord]:
        """List one employee's records of a kind."""

    @abstractmethod
    def create_record(self, kind: ResourceKind, payload: RecordModel) -> ChildRecord:
        """Insert a child record with a fresh id."""

    @abstractmethod
    def update_record(
        self, kind: ResourceKind, record_id: str, patch: RecordModel
    ) -> ChildRecord:
        """Shallow-merge the fields set on ``patch`` into a child record."""

    @abstractmethod
    def delete_record(self, kind: ResourceKind, record_id: str) -> None:
        """Delete a child record if present."""

    @abstractmethod
    def snapshot(self) -> StorageData:
        """Return every collection as JSON-ready data."""

    def close(self) -> None:
        """Release engine resources."""

    def collection(self, kind: ResourceKind) -> RecordCollection:
        """Get a view of one child collection."""
        return RecordCollection(self, RECORD_TYPES[kind])


class RecordCollection:
    """One child collection of a storage engine.

    Usage:
        training = storage.collection(ResourceKind.TRAINING)
        record = training.create(training.record_type.create_model(...))
        training.list_by_employee(record.employee_id)
    """

    def __init__(self, storage: Storage, record_type: RecordType) -> None:
        self.storage = storage
        self.record_type = record_type

    @property
    def kind(self) -> ResourceKind:
        return self.record_type.kind

    def list_by_employee(self, employee_id: str) -> list[ChildRecord]:
        return self.storage.list_records(self.kind, employee_id)

    def create(self, payload: RecordModel) -> ChildRecord:
        return self.storage.create_record(self.kind, payload)

    def update(self, record_id: str, patch: RecordModel) -> ChildRecord:
        return self.storage.update_record(self.kind, record_id, patch)

    def delete(self, record_id: str) -> None:
        self.storage.delete_record(self.kind, record_id)


# ============================================================================
# Record construction shared by engines
# ============================================================================


def new_id() -> str:
    return str(uuid4())


def next_timestamp(previous: datetime | None = None) -> datetime:
    """Current UTC time, strictly later than ``previous``."""
    now = datetime.now(timezone.utc)
    if previous is not None:
        if previous.tzinfo is None:
            previous = previous.replace(tzinfo=timezone.utc)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    return now


def build_employee(payload: EmployeeCreate) -> Employee:
    now = next_timestamp()
    return Employee.model_validate(
        {**payload.model_dump(), "id": new_id(), "created_at": now, "updated_at": now}
    )


def patch_employee(existing: Employee, patch: EmployeeUpdate) -> Employee:
    changes = patch.model_dump(exclude_unset=True)
    current = existing.model_dump()
    if "profile_data" in changes:
        changes["profile_data"] = merge_profile(
            current.get("profile_data"), changes["profile_data"]
        )
    return Employee.model_validate(
        {
            **current,
            **changes,
            "id": existing.id,
            "created_at": existing.created_at,
            "updated_at": next_timestamp(existing.updated_at),
        }
    )


def build_record(record_type: RecordType, payload: RecordModel) -> ChildRecord:
    values = payload.model_dump()
    values["id"] = new_id()
    if record_type.stamps_created_at:
        values["created_at"] = next_timestamp()
    return record_type.model.model_validate(values)


def patch_record(record_type: RecordType, existing: ChildRecord, patch: RecordModel) -> ChildRecord:
    changes = patch.model_dump(exclude_unset=True)
    return record_type.model.model_validate(
        {**existing.model_dump(), **changes, "id": existing.id}
    )
