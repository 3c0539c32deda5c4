"""Base model classes for employee records."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base class for all record schemas.

    Attributes are snake_case in Python and camelCase on the wire and on disk.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-ready dictionary with wire names."""
        return self.model_dump(by_alias=True, mode="json")


class ChildRecord(RecordModel):
    """A record owned by one employee."""

    id: str
    employee_id: str = Field(min_length=1)


def derive_model(
    model: type[RecordModel],
    name: str,
    *,
    omit: tuple[str, ...] = (),
    optional: bool = False,
) -> type[RecordModel]:
    """Derive an input schema from a record schema.

    ``omit`` drops engine-assigned fields (ids, timestamps). With
    ``optional`` every field becomes optional and defaults to None while
    keeping its constraints, which is what partial updates validate against.
    """
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        if field_name in omit:
            continue
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        if optional:
            fields[field_name] = (Optional[annotation], None)
        elif info.is_required():
            fields[field_name] = (annotation, ...)
        else:
            fields[field_name] = (annotation, info.get_default(call_default_factory=True))
    return create_model(name, __base__=RecordModel, __module__=model.__module__, **fields)
