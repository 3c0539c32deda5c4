"""Descriptor-driven CRUD routes for employee child collections.

Each child collection gets the same four endpoints, generated from a
``ResourceDescriptor`` instead of being written by hand:

    GET    /employees/{employee_id}/<segment>   list one employee's records
    POST   /employees/{employee_id}/<segment>   create (201)
    PATCH  /<segment>/{record_id}               partial update (404 if missing)
    DELETE /<segment>/{record_id}               delete (204, even if missing)

Handlers reach the engine through ``storage.collection(kind)``, so the
descriptor names a ``ResourceKind`` rather than accessor methods.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Path, Response, status
from pydantic import ValidationError

from employee_records.api.dependencies import StorageDep
from employee_records.api.schemas import ErrorResponse
from employee_records.models import RECORD_TYPES, ChildRecord, RecordType, ResourceKind
from employee_records.storage import RecordNotFoundError

logger = logging.getLogger(__name__)

NO_CACHE = "no-store, no-cache, must-revalidate, private"


@dataclass(frozen=True)
class ResourceDescriptor:
    """Declarative configuration of one child collection's routes.

    Attributes:
        kind: Collection served by the routes.
        requires_employee_id_match: If True, POST bodies must already carry
            an employeeId equal to the path's; otherwise the path value is
            merged into the body.
        enable_logging: If True, log every request and failure.
        enable_cache_control: If True, responses forbid client and proxy
            caching.
    """

    kind: ResourceKind
    requires_employee_id_match: bool = False
    enable_logging: bool = False
    enable_cache_control: bool = False

    @property
    def record_type(self) -> RecordType:
        return RECORD_TYPES[self.kind]

    @property
    def name(self) -> str:
        """URL segment of the resource."""
        return self.record_type.segment


DEFAULT_DESCRIPTORS: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor(ResourceKind.EDUCATION),
    ResourceDescriptor(ResourceKind.EMPLOYMENT_HISTORY),
    ResourceDescriptor(ResourceKind.BONUSES),
    ResourceDescriptor(ResourceKind.COMPENSATION),
    ResourceDescriptor(ResourceKind.TIME_OFF),
    ResourceDescriptor(ResourceKind.DOCUMENTS),
    ResourceDescriptor(ResourceKind.BENEFITS),
    ResourceDescriptor(ResourceKind.DEPENDENTS),
    ResourceDescriptor(ResourceKind.TRAINING),
    ResourceDescriptor(ResourceKind.ASSETS),
    ResourceDescriptor(ResourceKind.NOTES),
    ResourceDescriptor(ResourceKind.EMERGENCY_CONTACTS),
    ResourceDescriptor(
        ResourceKind.ONBOARDING,
        enable_logging=True,
        enable_cache_control=True,
    ),
    ResourceDescriptor(ResourceKind.OFFBOARDING),
)


def build_resource_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Create the four CRUD routes for one descriptor."""
    record_type = descriptor.record_type
    name = descriptor.name
    collection_path = f"/employees/{{employee_id}}/{name}"
    item_path = f"/{name}/{{record_id}}"
    router = APIRouter(tags=[name])

    def log(message: str, *args: Any) -> None:
        if descriptor.enable_logging:
            logger.info(message, *args)

    def log_error(message: str, *args: Any) -> None:
        if descriptor.enable_logging:
            logger.exception(message, *args)

    def apply_cache_control(response: Response) -> None:
        if descriptor.enable_cache_control:
            response.headers["Cache-Control"] = NO_CACHE

    @router.get(
        collection_path,
        response_model=list[record_type.model],
        name=f"list_{record_type.key}",
    )
    async def list_records(
        storage: StorageDep,
        response: Response,
        employee_id: Annotated[str, Path()],
    ) -> list[ChildRecord]:
        log("Handling GET %s for: %s", collection_path, employee_id)
        records = storage.collection(descriptor.kind).list_by_employee(employee_id)
        apply_cache_control(response)
        return records

    @router.post(
        collection_path,
        response_model=record_type.model,
        status_code=status.HTTP_201_CREATED,
        responses={400: {"model": ErrorResponse}},
        name=f"create_{record_type.key}",
    )
    async def create_record(
        storage: StorageDep,
        response: Response,
        employee_id: Annotated[str, Path()],
        body: Annotated[Any, Body()],
    ) -> ChildRecord:
        log("Handling POST %s for: %s", collection_path, employee_id)
        data = body
        if not descriptor.requires_employee_id_match and isinstance(body, dict):
            data = {**body, "employeeId": employee_id}
        try:
            payload = record_type.create_model.model_validate(data)
        except ValidationError:
            log_error("Error in POST %s", collection_path)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid {name} data",
            )
        if descriptor.requires_employee_id_match and payload.employee_id != employee_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Employee ID mismatch",
            )

        record = storage.collection(descriptor.kind).create(payload)
        apply_cache_control(response)
        return record

    @router.patch(
        item_path,
        response_model=record_type.model,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        name=f"update_{record_type.key}",
    )
    async def update_record(
        storage: StorageDep,
        response: Response,
        record_id: Annotated[str, Path()],
        body: Annotated[Any, Body()],
    ) -> ChildRecord:
        log("Handling PATCH %s for: %s", item_path, record_id)
        try:
            patch = record_type.update_model.model_validate(body)
            record = storage.collection(descriptor.kind).update(record_id, patch)
        except ValidationError:
            log_error("Error in PATCH %s", item_path)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid {name} data",
            )
        except RecordNotFoundError:
            log_error("Error in PATCH %s", item_path)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{record_type.label} not found",
            )
        apply_cache_control(response)
        return record

    @router.delete(
        item_path,
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{record_type.key}",
    )
    async def delete_record(
        storage: StorageDep,
        record_id: Annotated[str, Path()],
    ) -> Response:
        log("Handling DELETE %s for: %s", item_path, record_id)
        storage.collection(descriptor.kind).delete(record_id)
        response = Response(status_code=status.HTTP_204_NO_CONTENT)
        apply_cache_control(response)
        return response

    return router


def build_resources_router(
    descriptors: Iterable[ResourceDescriptor] = DEFAULT_DESCRIPTORS,
) -> APIRouter:
    """Combine the routers of every descriptor."""
    router = APIRouter()
    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.name in seen:
            raise ValueError(f"Duplicate resource descriptor for {descriptor.name!r}")
        seen.add(descriptor.name)
        router.include_router(build_resource_router(descriptor))
    return router
