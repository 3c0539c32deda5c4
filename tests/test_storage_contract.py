"""Contract tests run against every storage engine."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from employee_records.models import (
    RECORD_TYPES,
    EmployeeCreate,
    EmployeeUpdate,
    JobInfoUpdate,
    ResourceKind,
)
from employee_records.storage import SAMPLE_EMPLOYEE_ID, RecordNotFoundError, Storage
from employee_records.storage import base as storage_base

TRAINING = ResourceKind.TRAINING

FROZEN_NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


class FrozenDatetime(datetime):
    """datetime whose clock never moves."""

    @classmethod
    def now(cls, tz=None):
        return FROZEN_NOW


def create_record(storage: Storage, kind: ResourceKind, employee_id: str = SAMPLE_EMPLOYEE_ID, **fields):
    payload = RECORD_TYPES[kind].create_model.model_validate({"employeeId": employee_id, **fields})
    return storage.collection(kind).create(payload)


def patch_for(kind: ResourceKind, **fields):
    return RECORD_TYPES[kind].update_model.model_validate(fields)


class TestEmployeeOperations:
    """Test the employee aggregate."""

    def test_seeded_employee(self, storage: Storage):
        employee = storage.get_employee(SAMPLE_EMPLOYEE_ID)

        assert employee is not None
        assert employee.full_name == "Muhammad Hamza Anis"
        assert isinstance(employee.created_at, datetime)
        assert employee.profile_data.address.city == "Salt Lake City"

    def test_get_missing_returns_none(self, storage: Storage):
        assert storage.get_employee("does-not-exist") is None

    def test_create_assigns_id_and_timestamps(self, storage: Storage):
        employee = storage.create_employee(
            EmployeeCreate.model_validate(
                {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com"}
            )
        )

        assert employee.id
        assert employee.created_at is not None
        assert employee.created_at == employee.updated_at
        assert storage.get_employee(employee.id).to_dict() == employee.to_dict()
        assert len(storage.list_employees()) == 2

    def test_create_assigns_unique_ids(self, storage: Storage):
        payload = EmployeeCreate.model_validate(
            {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com"}
        )
        first = storage.create_employee(payload)
        second = storage.create_employee(payload)

        assert first.id != second.id

    def test_update_shallow_merges_top_level_fields(self, storage: Storage):
        updated = storage.update_employee(
            SAMPLE_EMPLOYEE_ID, EmployeeUpdate.model_validate({"jobTitle": "Director"})
        )

        assert updated.id == SAMPLE_EMPLOYEE_ID
        assert updated.job_title == "Director"
        assert updated.department == "Operations"
        assert storage.get_employee(SAMPLE_EMPLOYEE_ID).job_title == "Director"

    def test_update_merges_profile_by_path(self, storage: Storage):
        updated = storage.update_employee(
            SAMPLE_EMPLOYEE_ID,
            EmployeeUpdate.model_validate({"profileData": {"personal": {"gender": "Female"}}}),
        )

        assert updated.profile_data.personal.gender == "Female"
        assert updated.profile_data.personal.preferred_name == "Hamza"
        assert updated.profile_data.address.city == "Salt Lake City"
        assert updated.profile_data.visa.status == "Active"

    def test_updated_at_advances_on_every_mutation(self, storage: Storage):
        before = storage.get_employee(SAMPLE_EMPLOYEE_ID)
        first = storage.update_employee(
            SAMPLE_EMPLOYEE_ID, EmployeeUpdate.model_validate({"phone": "1"})
        )
        second = storage.update_employee(
            SAMPLE_EMPLOYEE_ID, EmployeeUpdate.model_validate({"phone": "2"})
        )

        assert before.updated_at < first.updated_at < second.updated_at
        assert second.created_at == before.created_at

    def test_updated_at_bumped_when_clock_stands_still(
        self, storage: Storage, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setattr(storage_base, "datetime", FrozenDatetime)
        employee = storage.create_employee(
            EmployeeCreate.model_validate(
                {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com"}
            )
        )
        first = storage.update_employee(employee.id, EmployeeUpdate.model_validate({"phone": "1"}))
        second = storage.update_employee(employee.id, EmployeeUpdate.model_validate({"phone": "2"}))

        assert employee.updated_at == FROZEN_NOW
        assert first.updated_at == FROZEN_NOW + timedelta(microseconds=1)
        assert second.updated_at == first.updated_at + timedelta(microseconds=1)
        assert second.created_at == FROZEN_NOW
        assert storage.get_employee(employee.id).updated_at == second.updated_at

    def test_update_missing_raises_not_found(self, storage: Storage):
        with pytest.raises(RecordNotFoundError) as exc_info:
            storage.update_employee(
                "does-not-exist", EmployeeUpdate.model_validate({"firstName": "X"})
            )

        assert exc_info.value.label == "Employee"
        assert storage.get_employee("does-not-exist") is None

    def test_update_cannot_clear_required_field(self, storage: Storage):
        with pytest.raises(ValidationError):
            storage.update_employee(
                SAMPLE_EMPLOYEE_ID, EmployeeUpdate.model_validate({"email": None})
            )

    def test_update_job_info(self, storage: Storage):
        updated = storage.update_job_info(
            SAMPLE_EMPLOYEE_ID,
            JobInfoUpdate.model_validate({"department": "People", "hireDate": "2023-01-02"}),
        )

        assert updated.department == "People"
        assert updated.hire_date == "2023-01-02"
        assert updated.job_title == "HR Administrator"

    def test_delete_is_idempotent_and_does_not_cascade(self, storage: Storage):
        storage.delete_employee(SAMPLE_EMPLOYEE_ID)
        storage.delete_employee(SAMPLE_EMPLOYEE_ID)

        assert storage.get_employee(SAMPLE_EMPLOYEE_ID) is None
        assert len(storage.list_records(TRAINING, SAMPLE_EMPLOYEE_ID)) == 11


class TestChildRecordOperations:
    """Test the child collections."""

    def test_seeded_records(self, storage: Storage):
        assert len(storage.list_records(TRAINING, SAMPLE_EMPLOYEE_ID)) == 11
        assert len(storage.list_records(ResourceKind.BONUSES, SAMPLE_EMPLOYEE_ID)) == 2
        assert storage.list_records(ResourceKind.ASSETS, SAMPLE_EMPLOYEE_ID) == []

    def test_create_then_list_finds_exactly_one(self, storage: Storage):
        record = create_record(storage, TRAINING, name="Safety", category="General", status="Pending")

        matches = [
            r for r in storage.collection(TRAINING).list_by_employee(SAMPLE_EMPLOYEE_ID)
            if r.id == record.id
        ]
        assert len(matches) == 1
        assert matches[0].to_dict() == record.to_dict()
        assert record.employee_id == SAMPLE_EMPLOYEE_ID

    def test_list_is_scoped_to_employee(self, storage: Storage):
        other = create_record(storage, ResourceKind.ASSETS, employee_id="emp-2", category="Laptop")

        assert [r.id for r in storage.list_records(ResourceKind.ASSETS, "emp-2")] == [other.id]
        assert storage.list_records(ResourceKind.ASSETS, SAMPLE_EMPLOYEE_ID) == []

    def test_orphan_records_are_accepted(self, storage: Storage):
        record = create_record(storage, ResourceKind.NOTES, employee_id="nobody", title="Orphan")

        assert storage.get_employee("nobody") is None
        assert storage.list_records(ResourceKind.NOTES, "nobody")[0].id == record.id

    def test_partial_update_preserves_unspecified_fields(self, storage: Storage):
        benefit = create_record(
            storage,
            ResourceKind.BENEFITS,
            type="Medical",
            plan="Gold PPO",
            status="Pending",
            enrollmentDate="2025-01-01",
        )

        updated = storage.update_record(
            ResourceKind.BENEFITS, benefit.id, patch_for(ResourceKind.BENEFITS, status="Active")
        )

        assert updated.status == "Active"
        assert updated.plan == "Gold PPO"
        assert updated.type == "Medical"
        assert updated.enrollment_date == "2025-01-01"
        assert updated.id == benefit.id

    def test_update_missing_raises_not_found(self, storage: Storage):
        with pytest.raises(RecordNotFoundError) as exc_info:
            storage.update_record(TRAINING, "missing", patch_for(TRAINING, status="Completed"))

        assert exc_info.value.label == "Training"
        assert exc_info.value.record_id == "missing"

    def test_update_cannot_clear_required_field(self, storage: Storage):
        bonus = create_record(
            storage, ResourceKind.BONUSES, type="Spot", amount="$100", frequency="One-time"
        )

        with pytest.raises(ValidationError):
            storage.update_record(
                ResourceKind.BONUSES, bonus.id, patch_for(ResourceKind.BONUSES, type=None)
            )

    def test_delete_removes_record(self, storage: Storage):
        record = create_record(storage, TRAINING, name="Safety")

        storage.delete_record(TRAINING, record.id)

        assert record.id not in [r.id for r in storage.list_records(TRAINING, SAMPLE_EMPLOYEE_ID)]

    def test_delete_missing_is_noop(self, storage: Storage):
        storage.delete_record(TRAINING, "missing")
        storage.delete_record(TRAINING, "missing")

        assert len(storage.list_records(TRAINING, SAMPLE_EMPLOYEE_ID)) == 11

    def test_engine_stamps_created_at(self, storage: Storage):
        note = create_record(storage, ResourceKind.NOTES, title="Hello")
        dependent = create_record(
            storage,
            ResourceKind.DEPENDENTS,
            firstName="Sam",
            lastName="Anis",
            relationship="Child",
            dateOfBirth="2015-06-01",
        )

        assert isinstance(note.created_at, datetime)
        assert isinstance(dependent.created_at, datetime)

    def test_snapshot_has_every_collection(self, storage: Storage):
        snapshot = storage.snapshot()

        assert set(snapshot) >= {"employees", *(kind.value for kind in ResourceKind)}
        assert snapshot["employees"][SAMPLE_EMPLOYEE_ID]["firstName"] == "Muhammad Hamza"


class TestNextTimestamp:
    """Test the monotonic timestamp helper."""

    def test_uses_clock_when_it_has_moved(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(storage_base, "datetime", FrozenDatetime)

        assert storage_base.next_timestamp(FROZEN_NOW - timedelta(seconds=1)) == FROZEN_NOW

    def test_bumps_past_previous(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(storage_base, "datetime", FrozenDatetime)

        assert storage_base.next_timestamp(FROZEN_NOW) == FROZEN_NOW + timedelta(microseconds=1)

    def test_naive_previous_is_read_as_utc(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(storage_base, "datetime", FrozenDatetime)

        result = storage_base.next_timestamp(datetime(2025, 1, 1, 12, 0))

        assert result == FROZEN_NOW + timedelta(microseconds=1)
        assert result.tzinfo is not None
