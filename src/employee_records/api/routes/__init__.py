"""API routes."""

from employee_records.api.routes.employees import router as employees_router
from employee_records.api.routes.health import router as health_router
from employee_records.api.routes.resources import (
    DEFAULT_DESCRIPTORS,
    ResourceDescriptor,
    build_resource_router,
    build_resources_router,
)

__all__ = [
    "DEFAULT_DESCRIPTORS",
    "ResourceDescriptor",
    "build_resource_router",
    "build_resources_router",
    "employees_router",
    "health_router",
]
