"""Registry of child record kinds.

Maps each ``ResourceKind`` to its schemas, storage key, URL segment and
display label. Engines and the route factory dispatch through this table
instead of looking up accessors by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from employee_records.models.base import ChildRecord, RecordModel, derive_model
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

EMPLOYEES_KEY = "employees"


class ResourceKind(str, Enum):
    """Child collection kinds; values are the storage keys."""

    EDUCATION = "education"
    EMPLOYMENT_HISTORY = "employmentHistory"
    COMPENSATION = "compensation"
    TIME_OFF = "timeOff"
    DOCUMENTS = "documents"
    BENEFITS = "benefits"
    TRAINING = "training"
    ASSETS = "assets"
    NOTES = "notes"
    EMERGENCY_CONTACTS = "emergencyContacts"
    DEPENDENTS = "dependents"
    ONBOARDING = "onboarding"
    OFFBOARDING = "offboarding"
    BONUSES = "bonuses"


@dataclass(frozen=True)
class RecordType:
    """Schemas and naming for one child collection."""

    kind: ResourceKind
    model: type[ChildRecord]
    create_model: type[RecordModel]
    update_model: type[RecordModel]
    segment: str
    label: str

    @property
    def key(self) -> str:
        """Top-level key of this collection in the storage document."""
        return self.kind.value

    @property
    def stamps_created_at(self) -> bool:
        """Whether the engine assigns ``created_at`` on create."""
        return "created_at" in self.model.model_fields


def _record_type(
    kind: ResourceKind, model: type[ChildRecord], segment: str, label: str
) -> RecordType:
    omit = ("id", "created_at")
    create = derive_model(model, f"{model.__name__}Create", omit=omit)
    update = derive_model(create, f"{model.__name__}Update", optional=True)
    return RecordType(
        kind=kind,
        model=model,
        create_model=create,
        update_model=update,
        segment=segment,
        label=label,
    )


RECORD_TYPES: dict[ResourceKind, RecordType] = {
    rt.kind: rt
    for rt in (
        _record_type(ResourceKind.EDUCATION, Education, "education", "Education"),
        _record_type(
            ResourceKind.EMPLOYMENT_HISTORY,
            EmploymentHistory,
            "employment-history",
            "Employment history",
        ),
        _record_type(ResourceKind.COMPENSATION, Compensation, "compensation", "Compensation"),
        _record_type(ResourceKind.TIME_OFF, TimeOff, "time-off", "Time off"),
        _record_type(ResourceKind.DOCUMENTS, Document, "documents", "Document"),
        _record_type(ResourceKind.BENEFITS, Benefit, "benefits", "Benefit"),
        _record_type(ResourceKind.TRAINING, Training, "training", "Training"),
        _record_type(ResourceKind.ASSETS, Asset, "assets", "Asset"),
        _record_type(ResourceKind.NOTES, Note, "notes", "Note"),
        _record_type(
            ResourceKind.EMERGENCY_CONTACTS,
            EmergencyContact,
            "emergency-contacts",
            "Emergency contact",
        ),
        _record_type(ResourceKind.DEPENDENTS, Dependent, "dependents", "Dependent"),
        _record_type(ResourceKind.ONBOARDING, Onboarding, "onboarding", "Onboarding"),
        _record_type(ResourceKind.OFFBOARDING, Offboarding, "offboarding", "Offboarding"),
        _record_type(ResourceKind.BONUSES, Bonus, "bonuses", "Bonus"),
    )
}

# Top-level keys of the storage document, in file order
COLLECTION_KEYS: tuple[str, ...] = (EMPLOYEES_KEY, *(kind.value for kind in ResourceKind))
