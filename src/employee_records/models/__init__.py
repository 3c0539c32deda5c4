"""Employee record schemas."""

from employee_records.models.base import ChildRecord, RecordModel, derive_model
from employee_records.models.employee import (
    AddressInfo,
    ContactInfo,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    JobInfoUpdate,
    PersonalInfo,
    ProfileData,
    SocialLinks,
    VisaInfo,
    merge_profile,
)
from employee_records.models.records import (
    Asset,
    Benefit,
    Bonus,
    Compensation,
    Dependent,
    Document,
    Education,
    EmergencyContact,
    EmploymentHistory,
    Note,
    Offboarding,
    Onboarding,
    TimeOff,
    Training,
)
from employee_records.models.registry import (
    COLLECTION_KEYS,
    EMPLOYEES_KEY,
    RECORD_TYPES,
    RecordType,
    ResourceKind,
)

__all__ = [
    # Base
    "ChildRecord",
    "RecordModel",
    "derive_model",
    # Employee
    "AddressInfo",
    "ContactInfo",
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "JobInfoUpdate",
    "PersonalInfo",
    "ProfileData",
    "SocialLinks",
    "VisaInfo",
    "merge_profile",
    # Child records
    "Asset",
    "Benefit",
    "Bonus",
    "Compensation",
    "Dependent",
    "Document",
    "Education",
    "EmergencyContact",
    "EmploymentHistory",
    "Note",
    "Offboarding",
    "Onboarding",
    "TimeOff",
    "Training",
    # Registry
    "COLLECTION_KEYS",
    "EMPLOYEES_KEY",
    "RECORD_TYPES",
    "RecordType",
    "ResourceKind",
]
