"""Employee aggregate and its nested profile data."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from employee_records.models.base import RecordModel, derive_model


# ============================================================================
# Profile sections
# ============================================================================


class PersonalInfo(RecordModel):
    preferred_name: str | None = None
    gender: str | None = None
    date_of_birth: str | None = None
    marital_status: str | None = None
    ssn: str | None = None


class AddressInfo(RecordModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class ContactInfo(RecordModel):
    work_phone: str | None = None
    mobile_phone: str | None = None
    home_phone: str | None = None
    personal_email: str | None = None


class SocialLinks(RecordModel):
    linkedin: str | None = None
    twitter: str | None = None
    website: str | None = None


class VisaInfo(RecordModel):
    type: str | None = None
    status: str | None = None
    expiration: str | None = None
    sponsorship_required: bool | None = None


class ProfileData(RecordModel):
    """Grouped personal details stored on the employee."""

    personal: PersonalInfo | None = None
    address: AddressInfo | None = None
    contact: ContactInfo | None = None
    social: SocialLinks | None = None
    visa: VisaInfo | None = None


# ============================================================================
# Employee
# ============================================================================


class Employee(RecordModel):
    """Employee record (aggregate root)."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    job_title: str | None = None
    department: str | None = None
    location: str | None = None
    hire_date: str | None = None
    profile_data: ProfileData | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        """Get full name."""
        return f"{self.first_name} {self.last_name}"


EmployeeCreate = derive_model(
    Employee, "EmployeeCreate", omit=("id", "created_at", "updated_at")
)
EmployeeUpdate = derive_model(EmployeeCreate, "EmployeeUpdate", optional=True)


class JobInfoUpdate(RecordModel):
    """Patch restricted to the job section of an employee."""

    job_title: str | None = None
    department: str | None = None
    location: str | None = None
    hire_date: str | None = None


def merge_profile(
    current: dict[str, Any] | None, patch: dict[str, Any] | None
) -> dict[str, Any] | None:
    """Merge a profile patch into stored profile data section by section.

    Only the fields present in ``patch`` are written, so updating one field
    of ``personal`` keeps the other personal fields and every other section.
    A section explicitly set to None clears it.
    """
    if patch is None:
        return None
    merged = {key: dict(value) if value else value for key, value in (current or {}).items()}
    for section, values in patch.items():
        if values is None or not merged.get(section):
            merged[section] = values
        else:
            merged[section].update(values)
    return merged
