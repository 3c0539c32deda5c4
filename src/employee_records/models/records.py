"""Child record schemas.

Every child record belongs to exactly one employee through ``employee_id``
and has no children of its own.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from employee_records.models.base import ChildRecord


class Education(ChildRecord):
    institution: str | None = None
    degree: str | None = None
    field_of_study: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None


class EmploymentHistory(ChildRecord):
    effective_date: str | None = None
    status: str | None = None
    location: str | None = None
    division: str | None = None
    department: str | None = None
    job_title: str | None = None
    reports_to: str | None = None
    comment: str | None = None


class Compensation(ChildRecord):
    effective_date: str | None = None
    pay_rate: str | None = None
    pay_type: str | None = None
    overtime: str | None = None
    change_reason: str | None = None
    comment: str | None = None


class Bonus(ChildRecord):
    type: str = Field(min_length=1)
    amount: str = Field(min_length=1)
    frequency: str = Field(min_length=1)
    eligibility_date: str | None = None
    description: str | None = None


class TimeOff(ChildRecord):
    type: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    days: str | None = None
    status: str | None = None
    comment: str | None = None


class Document(ChildRecord):
    category: str | None = None
    name: str | None = None
    file_name: str | None = None
    upload_date: str | None = None


class Benefit(ChildRecord):
    type: str | None = None
    plan: str | None = None
    status: str | None = None
    enrollment_date: str | None = None


class Dependent(ChildRecord):
    first_name: str
    last_name: str
    relationship: str
    date_of_birth: str
    ssn: str | None = None
    gender: str | None = None
    is_student: bool = False
    created_at: datetime | None = None


class Training(ChildRecord):
    name: str | None = None
    category: str | None = None
    status: str | None = None
    due_date: str | None = None
    completed_date: str | None = None
    credits: str | None = None


class Asset(ChildRecord):
    category: str | None = None
    description: str | None = None
    serial_number: str | None = None
    date_assigned: str | None = None


class Note(ChildRecord):
    title: str | None = None
    content: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None


class EmergencyContact(ChildRecord):
    first_name: str | None = None
    last_name: str | None = None
    relationship: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None


class Onboarding(ChildRecord):
    """Onboarding checklist task."""

    task: str | None = None
    description: str | None = None
    due_date: str | None = None
    status: str | None = None
    completed_date: str | None = None


class Offboarding(ChildRecord):
    """Offboarding checklist task."""

    task: str | None = None
    description: str | None = None
    due_date: str | None = None
    status: str | None = None
    completed_date: str | None = None
