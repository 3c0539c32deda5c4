"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from employee_records.storage import Storage


def get_storage(request: Request) -> Storage:
    """Get the storage engine bound to the running application."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storage is not initialized",
        )
    return storage


# Type aliases for cleaner dependency injection
StorageDep = Annotated[Storage, Depends(get_storage)]
