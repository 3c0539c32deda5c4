"""In-memory record store engine."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

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


class MemoryStorage(Storage):
    """Storage engine holding every collection in dicts keyed by record id.

    Subclasses add durability by overriding ``_persist``, which is called
    after every mutation.
    """

    backend = "memory"

    def __init__(self, seed: bool = False) -> None:
        self._data: dict[str, dict[str, Any]] = {key: {} for key in COLLECTION_KEYS}
        # Stored records that fail validation, written back untouched
        self._unreadable: dict[str, dict[str, Any]] = {key: {} for key in COLLECTION_KEYS}
        if seed:
            self._adopt(sample_data())

    def _persist(self) -> None:
        """Hook for engines that write the collections somewhere durable."""

    def _adopt(self, document: StorageData) -> None:
        """Replace in-memory state with a parsed storage document.

        Raises ValueError if the document is not a JSON object; current state
        is left untouched in that case. Records that fail validation are
        logged and kept aside as stored, so saving never drops them. Records
        are keyed by their own ``id``.
        """
        if not isinstance(document, dict):
            raise ValueError("Storage document must be a JSON object")

        data: dict[str, dict[str, Any]] = {}
        unreadable: dict[str, dict[str, Any]] = {}
        for key in COLLECTION_KEYS:
            data[key], unreadable[key] = {}, {}
            raw = document.get(key)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                logger.warning(
                    "Ignoring collection %r: expected an object, got %s",
                    key,
                    type(raw).__name__,
                )
                continue
            model = Employee if key == EMPLOYEES_KEY else RECORD_TYPES[ResourceKind(key)].model
            for record_id, value in raw.items():
                try:
                    record = model.model_validate(value)
                except ValidationError as exc:
                    logger.warning(
                        "Skipping invalid %s record %s (%d errors)",
                        key,
                        record_id,
                        exc.error_count(),
                    )
                    unreadable[key][record_id] = value
                    continue
                if record.id != record_id:
                    logger.warning(
                        "%s record stored under %s has id %s, keying by id",
                        key,
                        record_id,
                        record.id,
                    )
                data[key][record.id] = record
        self._data = data
        self._unreadable = unreadable

    # Employees

    def get_employee(self, employee_id: str) -> Employee | None:
        return self._data[EMPLOYEES_KEY].get(employee_id)

    def list_employees(self) -> list[Employee]:
        return list(self._data[EMPLOYEES_KEY].values())

    def create_employee(self, payload: EmployeeCreate) -> Employee:
        employee = build_employee(payload)
        self._data[EMPLOYEES_KEY][employee.id] = employee
        self._persist()
        return employee

    def update_employee(self, employee_id: str, patch: EmployeeUpdate) -> Employee:
        existing = self._data[EMPLOYEES_KEY].get(employee_id)
        if existing is None:
            raise RecordNotFoundError("Employee", employee_id)
        updated = patch_employee(existing, patch)
        self._data[EMPLOYEES_KEY][employee_id] = updated
        self._persist()
        logger.debug("Employee %s updated", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        self._data[EMPLOYEES_KEY].pop(employee_id, None)
        self._unreadable[EMPLOYEES_KEY].pop(employee_id, None)
        self._persist()

    # Child collections

    def list_records(self, kind: ResourceKind, employee_id: str) -> list[ChildRecord]:
        return [
            record
            for record in self._data[kind.value].values()
            if record.employee_id == employee_id
        ]

    def create_record(self, kind: ResourceKind, payload: RecordModel) -> ChildRecord:
        record = build_record(RECORD_TYPES[kind], payload)
        self._data[kind.value][record.id] = record
        self._persist()
        return record

    def update_record(
        self, kind: ResourceKind, record_id: str, patch: RecordModel
    ) -> ChildRecord:
        record_type = RECORD_TYPES[kind]
        existing = self._data[kind.value].get(record_id)
        if existing is None:
            raise RecordNotFoundError(record_type.label, record_id)
        updated = patch_record(record_type, existing, patch)
        self._data[kind.value][record_id] = updated
        self._persist()
        return updated

    def delete_record(self, kind: ResourceKind, record_id: str) -> None:
        self._data[kind.value].pop(record_id, None)
        self._unreadable[kind.value].pop(record_id, None)
        self._persist()

    def snapshot(self) -> StorageData:
        return {
            key: {
                **self._unreadable[key],
                **{record_id: record.to_dict() for record_id, record in records.items()},
            }
            for key, records in self._data.items()
        }
