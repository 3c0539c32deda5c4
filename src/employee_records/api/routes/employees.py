"""Employee API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Response, status

from employee_records.api.dependencies import StorageDep
from employee_records.api.schemas import ErrorResponse
from employee_records.models import Employee, EmployeeCreate, EmployeeUpdate, JobInfoUpdate

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Employee not found",
    )


@router.get("", response_model=list[Employee])
async def list_employees(storage: StorageDep) -> list[Employee]:
    """List all employees."""
    return storage.list_employees()


@router.get(
    "/{employee_id}",
    response_model=Employee,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(
    storage: StorageDep,
    employee_id: Annotated[str, Path()],
) -> Employee:
    """Get a specific employee by ID."""
    employee = storage.get_employee(employee_id)
    if employee is None:
        raise _not_found()
    return employee


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_employee(storage: StorageDep, payload: EmployeeCreate) -> Employee:
    """Create a new employee."""
    return storage.create_employee(payload)


@router.patch(
    "/{employee_id}",
    response_model=Employee,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_employee(
    storage: StorageDep,
    employee_id: Annotated[str, Path()],
    payload: EmployeeUpdate,
) -> Employee:
    """Patch an employee.

    Top-level fields are replaced; ``profileData`` is merged per section, so
    a body of ``{"profileData": {"personal": {"gender": "F"}}}`` leaves the
    other personal fields and the other sections as they were.
    """
    return storage.update_employee(employee_id, payload)


@router.patch(
    "/{employee_id}/job-info",
    response_model=Employee,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_job_info(
    storage: StorageDep,
    employee_id: Annotated[str, Path()],
    payload: JobInfoUpdate,
) -> Employee:
    """Patch the job title, department, location or hire date of an employee."""
    return storage.update_job_info(employee_id, payload)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_employee(
    storage: StorageDep,
    employee_id: Annotated[str, Path()],
) -> Response:
    """Delete an employee. Child records are kept."""
    storage.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
